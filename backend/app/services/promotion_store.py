"""
Promotion record store.

Thin access layer over the ``promotions`` table. The database is the only
arbiter of concurrent writes (last write wins); there is no hard delete.
"""

import logging

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models.promotion import Promotion, PromotionStatus
from app.services.validation import Validator

logger = logging.getLogger(__name__)

OWNER_REQUIRED = "Toda publicidad debe tener una dueno"

# request field -> column
EDITABLE_FIELDS = ("title", "description", "redirect_link", "image_id")


class PromotionStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, promotion_id: str) -> Promotion | None:
        return self.db.get(Promotion, promotion_id)

    def list_enabled(self) -> list[Promotion]:
        return (
            self.db.query(Promotion)
            .filter(Promotion.status == PromotionStatus.ENABLED)
            .order_by(Promotion.created_at.asc())
            .all()
        )

    def save(self, owner_id: str, values: dict, promotion_id: str | None = None) -> Promotion:
        """
        Create-or-update.

        Without ``promotion_id`` a new record owned by ``owner_id`` is inserted.
        With it, the editable fields of that record are replaced; the owner is
        never reassigned and an invalidated record stays invalidated.
        """
        if promotion_id:
            promo = self.get(promotion_id)
            if promo is None:
                raise NotFound("promotion", promotion_id)
        else:
            Validator().require_text(owner_id, "owner", OWNER_REQUIRED).raise_if_invalid()
            promo = Promotion(owner_id=owner_id, status=PromotionStatus.ENABLED)
            self.db.add(promo)

        for field in EDITABLE_FIELDS:
            if field in values and values[field] is not None:
                setattr(promo, field, values[field])

        if values.get("enabled") is False:
            promo.status = PromotionStatus.INVALIDATED

        self.db.commit()
        self.db.refresh(promo)
        return promo

    def invalidate(self, promotion_id: str) -> Promotion:
        promo = self.get(promotion_id)
        if promo is None:
            raise NotFound("promotion", promotion_id)

        if promo.status != PromotionStatus.INVALIDATED:
            promo.status = PromotionStatus.INVALIDATED
            self.db.commit()
            self.db.refresh(promo)
        return promo
