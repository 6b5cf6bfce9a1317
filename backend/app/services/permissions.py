"""
Permission gate.

Mutating operations call ``require`` before any write. The checker is handed
to the service at construction so tests and other deployments can swap it.
"""

import logging
from typing import Protocol, runtime_checkable

from sqlalchemy.orm import Session

from app.core.errors import PermissionDenied
from app.models.user import User

logger = logging.getLogger(__name__)


@runtime_checkable
class PermissionChecker(Protocol):
    def require(self, user_id: str, role: str) -> None:
        """Return normally if the user holds role, raise PermissionDenied otherwise."""
        ...


class UserPermissionChecker:
    """Checks roles against the ``permissions`` list stored on the user row."""

    def __init__(self, db: Session):
        self.db = db

    def has_permission(self, user_id: str, role: str) -> bool:
        user = self.db.get(User, user_id) if user_id else None
        if not user:
            return False
        return role in (user.permissions or [])

    def require(self, user_id: str, role: str) -> None:
        if not self.has_permission(user_id, role):
            logger.warning("Permission denied: user=%s role=%s", user_id, role)
            raise PermissionDenied(user_id, role)
