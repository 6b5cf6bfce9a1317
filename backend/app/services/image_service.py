"""
Banner image attachment.

The image is written to the image store first, then the id it hands back is
validated. Nothing here touches promotions: the caller embeds the returned id
in a later create/update. An image stored without a following promotion is
left in place; cleaning those up belongs to the image store.
"""

import logging
from typing import Protocol, runtime_checkable

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.image import Image
from app.services.validation import Validator

logger = logging.getLogger(__name__)


@runtime_checkable
class ImageStore(Protocol):
    def create(self, raw: dict) -> dict:
        """Persist raw image input ({"image": ...}) and return {"id": str}."""
        ...


class DatabaseImageStore:
    """Keeps the encoded payload as received in the ``images`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, raw: dict) -> dict:
        data = (raw or {}).get("image") or ""
        if not data:
            return {"id": ""}

        img = Image(data=data)
        self.db.add(img)
        self.db.commit()
        self.db.refresh(img)
        logger.info("Stored image %s (%d chars)", img.id, len(data))
        return {"id": img.id}


class ImageAttachmentWorkflow:
    def __init__(self, images: ImageStore):
        self.images = images

    def attach(self, raw: dict) -> str:
        result = self.images.create(raw)
        image_id = (result or {}).get("id") or ""

        v = Validator()
        v.check(len(image_id) > 0, "image", settings.INVALID_IMAGE_MESSAGE)
        v.raise_if_invalid()

        return image_id
