"""
Promotion lifecycle: list, create-or-update, read and invalidate.

Mutations go through the permission gate first and validate the whole input
before the store is touched, so a rejected call leaves nothing behind.
"""

import logging

from app.core.config import settings
from app.core.errors import NotFound
from app.schemas.promotion import PromotionInput, PromotionOut
from app.services.permissions import PermissionChecker
from app.services.promotion_store import PromotionStore
from app.services.validation import Validator

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Nombre no puede estar vacío."
DESCRIPTION_REQUIRED = "La desripcion de la publicidad no puede estar vacia."
REDIRECT_LINK_REQUIRED = "Toda publicidad debe tener un link que redireccione a la publicidad."


def _clean(value: str | None) -> str:
    return (value or "").strip()


def validate_promotion(data: PromotionInput) -> dict:
    """Trim the text fields and check them; returns the values to store."""
    values = {
        "title": _clean(data.title),
        "description": _clean(data.description),
        "redirect_link": _clean(data.redirect_link),
        "image_id": _clean(data.image_id),
    }

    v = Validator()
    v.require_text(values["title"], "title", TITLE_REQUIRED)
    v.require_text(values["description"], "description", DESCRIPTION_REQUIRED)
    v.require_text(values["redirect_link"], "redirectLink", REDIRECT_LINK_REQUIRED)
    v.raise_if_invalid()

    if data.enabled is not None:
        values["enabled"] = data.enabled
    return values


class PromotionService:
    def __init__(self, store: PromotionStore, permissions: PermissionChecker):
        self.store = store
        self.permissions = permissions

    def list(self) -> list[PromotionOut]:
        return [PromotionOut.model_validate(p) for p in self.store.list_enabled()]

    def create(self, user_id: str, data: PromotionInput) -> str:
        self.permissions.require(user_id, settings.ADMIN_ROLE)
        values = validate_promotion(data)

        promo = self.store.save(user_id, values, promotion_id=data.id)
        logger.info(
            "Promotion %s %s by %s", promo.id, "updated" if data.id else "created", user_id
        )
        return promo.id

    def read(self, promotion_id: str) -> PromotionOut:
        # invalidated promotions stay readable by id
        promo = self.store.get(promotion_id)
        if promo is None:
            raise NotFound("promotion", promotion_id)
        return PromotionOut.model_validate(promo)

    def invalidate(self, user_id: str, promotion_id: str) -> None:
        self.permissions.require(user_id, settings.ADMIN_ROLE)
        self.store.invalidate(promotion_id)
        logger.info("Promotion %s invalidated by %s", promotion_id, user_id)
