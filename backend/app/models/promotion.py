import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.db import Base


class PromotionStatus(str, enum.Enum):
    ENABLED = "enabled"
    INVALIDATED = "invalidated"


class Promotion(Base):
    __tablename__ = "promotions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(160), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    redirect_link: Mapped[str] = mapped_column(String(2048), default="")
    image_id: Mapped[str] = mapped_column(String(36), default="")
    owner_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    owner = relationship("User")
    status: Mapped[PromotionStatus] = mapped_column(
        Enum(PromotionStatus, native_enum=False, length=20),
        default=PromotionStatus.ENABLED,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )

    @property
    def enabled(self) -> bool:
        return self.status == PromotionStatus.ENABLED
