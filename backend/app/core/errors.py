"""Error taxonomy for the promotion API.

Every failure a caller can see is one of these. The HTTP layer maps them to
status codes in ``app.main``; anything else (database or image store
failures) propagates unchanged.
"""


class PromotionError(Exception):
    """Base class for all promotion API errors."""


class ValidationError(PromotionError):
    """One or more field rules failed.

    ``messages`` is the ordered report, one ``{"path", "message"}`` dict per
    violated rule, in the order the rules were evaluated.
    """

    def __init__(self, messages: list[dict]):
        self.messages = list(messages)
        super().__init__("; ".join(f"{m['path']}: {m['message']}" for m in self.messages))

    @property
    def paths(self) -> list[str]:
        return [m["path"] for m in self.messages]


class PermissionDenied(PromotionError):
    """The caller is not logged in or lacks the required role."""

    def __init__(self, user_id: str | None, role: str | None = None):
        self.user_id = user_id
        self.role = role
        if role:
            super().__init__(f"user {user_id!r} lacks role {role!r}")
        else:
            super().__init__("user authentication required")


class NotFound(PromotionError):
    """No record backs the requested identifier."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id!r} not found")
