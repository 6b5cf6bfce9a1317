"""Accumulate-then-fail field validation.

Rules are evaluated in full, in order, and the failures come back as one
report. Callers must not touch storage until ``raise_if_invalid`` passes.
"""

import logging

from app.core.errors import ValidationError

logger = logging.getLogger(__name__)


class Validator:
    def __init__(self):
        self._messages: list[dict] = []

    def add(self, path: str, message: str) -> "Validator":
        self._messages.append({"path": path, "message": message})
        return self

    def check(self, ok: bool, path: str, message: str) -> "Validator":
        if not ok:
            self.add(path, message)
        return self

    def require_text(self, value: str | None, path: str, message: str) -> "Validator":
        """Fails when value is missing or blank after trimming."""
        return self.check(bool((value or "").strip()), path, message)

    def is_valid(self) -> bool:
        return not self._messages

    def errors(self) -> list[dict]:
        return list(self._messages)

    def raise_if_invalid(self) -> None:
        if self._messages:
            logger.info("Validation failed: %s", [m["path"] for m in self._messages])
            raise ValidationError(self._messages)
