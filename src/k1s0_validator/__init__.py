"""k1s0 validator library."""

from .exceptions import FailedValidationError, ValidatorError, ValidatorErrorCodes
from .models import check_model
from .rules import (
    EMAIL_RX,
    matches,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
    unique,
)
from .validator import Validator

__all__ = [
    "EMAIL_RX",
    "FailedValidationError",
    "Validator",
    "ValidatorError",
    "ValidatorErrorCodes",
    "check_model",
    "matches",
    "max_chars",
    "min_chars",
    "not_blank",
    "permitted_value",
    "unique",
]
