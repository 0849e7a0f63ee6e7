"""Validator exceptions."""

from __future__ import annotations


class ValidatorError(Exception):
    """Base error for the validator library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ValidatorErrorCodes:
    """Error code constants for ValidatorError."""

    FAILED_VALIDATION: str = "FAILED_VALIDATION"
    INVALID_PATTERN: str = "INVALID_PATTERN"


class FailedValidationError(ValidatorError):
    """Raised when a Validator holding errors is asked to fail."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        keys = ", ".join(self.errors)
        super().__init__(
            code=ValidatorErrorCodes.FAILED_VALIDATION,
            message=f"Validation failed for: {keys}",
        )

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Returns the errors wrapped for a JSON response body."""
        return {"error": dict(self.errors)}
