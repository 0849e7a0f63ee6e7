"""Validation predicates."""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable
from typing import TypeVar

from .exceptions import ValidatorError, ValidatorErrorCodes

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

# https://html.spec.whatwg.org/#valid-e-mail-address
EMAIL_RX = re.compile(
    r"\A[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"  # local part
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"  # first domain label
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)


def permitted_value(value: T, *permitted_values: T) -> bool:
    """Returns True if value equals one of permitted_values.

    Compares with == only, so a NaN is never permitted.
    """
    return any(value == permitted for permitted in permitted_values)


def matches(value: str, pattern: re.Pattern[str] | str) -> bool:
    """Returns True if pattern matches value.

    Uses search semantics; anchoring is left to the pattern itself.
    A pattern string that does not compile raises ValidatorError.
    """
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error as e:
            raise ValidatorError(
                code=ValidatorErrorCodes.INVALID_PATTERN,
                message=f"Invalid pattern: {pattern!r}",
                cause=e,
            ) from e
    return pattern.search(value) is not None


def unique(values: Iterable[H]) -> bool:
    """Returns True if all values are distinct.

    Elements must be hashable; an unhashable element raises TypeError.
    Duplicates are found by hashing, which treats the same NaN object
    repeated as a duplicate.
    """
    items = list(values)
    return len(set(items)) == len(items)


def not_blank(value: str) -> bool:
    """Returns True if value contains a non-whitespace character."""
    return value.strip() != ""


def min_chars(value: str, n: int) -> bool:
    """Returns True if value has at least n characters."""
    return len(value) >= n


def max_chars(value: str, n: int) -> bool:
    """Returns True if value has at most n characters."""
    return len(value) <= n
