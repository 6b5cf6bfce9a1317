from sqlalchemy.orm import Session

from app.core.db import Base, engine, SessionLocal
from app.models.user import User
from app.models.promotion import Promotion


def reset_db(db: Session):
    # Drops & recreates all tables (local development only)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_users(db: Session):
    users = [
        User(id="admin", name="Administrador", permissions=["user", "admin"]),
        User(id="demo", name="Usuario Demo", permissions=["user"]),
    ]
    db.add_all(users)
    db.flush()  # so owners exist for promotions


def seed_promotions(db: Session):
    promos = [
        Promotion(
            title="Dia del Padre",
            description="Comprale a tu papa lo que siempre ha querido!",
            redirect_link="http://localhost:3000/promociones/dia-del-padre",
            owner_id="admin",
        ),
        Promotion(
            title="Vuelta a Clases",
            description="Todo para la escuela con envio gratis.",
            redirect_link="http://localhost:3000/promociones/vuelta-a-clases",
            owner_id="admin",
        ),
    ]
    db.add_all(promos)


def main():
    db = SessionLocal()
    try:
        reset_db(db)
        seed_users(db)
        seed_promotions(db)
        db.commit()

        print("✅ Seed complete.")
        print("Try:")
        print("- curl -H 'X-User-Id: admin' localhost:8000/v1/promotion")
        print("- curl -X DELETE -H 'X-User-Id: demo' localhost:8000/v1/promotion/<id>  (401)")
    finally:
        db.close()


if __name__ == "__main__":
    main()
