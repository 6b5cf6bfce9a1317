"""
Session dependency for the promotion routes.

Authentication itself happens upstream; by the time a request reaches us the
gateway has resolved the caller and forwards the id in a header.
"""

import logging
from typing import Optional

from fastapi import Header

from app.core.errors import PermissionDenied

logger = logging.getLogger(__name__)


def require_user(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """
    Only-logged-in dependency.

    Returns:
        user_id of the caller

    Raises:
        PermissionDenied: no user id on the request (mapped to 401)
    """
    user_id = (x_user_id or "").strip()
    if not user_id:
        logger.warning("Rejected anonymous request")
        raise PermissionDenied(None)
    return user_id
