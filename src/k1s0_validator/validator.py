"""Error-accumulating field validator."""

from __future__ import annotations

import structlog

from .exceptions import FailedValidationError

logger = structlog.stdlib.get_logger(__name__)


class Validator:
    """Collects at most one error message per field key.

    A Validator is created per validation attempt and owned by a single
    caller. Once a key has a message it keeps it: later failures for the
    same key are ignored.
    """

    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    def valid(self) -> bool:
        """Returns True if no errors have been recorded."""
        return len(self.errors) == 0

    def add_error(self, key: str, message: str) -> None:
        """Records message under key unless key already has one."""
        if key in self.errors:
            return
        self.errors[key] = message
        logger.debug("validation_error_recorded", key=key)

    def check(self, ok: bool, key: str, message: str) -> None:
        """Records message under key only if ok is false."""
        if not ok:
            self.add_error(key, message)

    def raise_if_invalid(self) -> None:
        """Raises FailedValidationError if any error has been recorded."""
        if self.valid():
            return
        logger.debug("validation_failed", keys=list(self.errors))
        raise FailedValidationError(self.errors)

    def __contains__(self, key: object) -> bool:
        return key in self.errors

    def __len__(self) -> int:
        return len(self.errors)

    def __repr__(self) -> str:
        return f"Validator(errors={self.errors!r})"
