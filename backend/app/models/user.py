from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column
from app.core.db import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(120), default="")
    permissions: Mapped[list] = mapped_column(JSON, default=list)  # e.g. ["user", "admin"]
