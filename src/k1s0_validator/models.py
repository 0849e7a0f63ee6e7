"""pydantic model validation into a Validator."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .validator import Validator

M = TypeVar("M", bound=BaseModel)

ROOT_KEY = "__root__"


def _error_key(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return ROOT_KEY
    return ".".join(str(part) for part in loc)


def check_model(validator: Validator, model: type[M], data: Any) -> M | None:
    """Validates data against model, recording failures on validator.

    Returns the model instance, or None if pydantic rejected the data. Each
    failure is recorded under its dotted location (e.g. "address.zip").
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            validator.add_error(_error_key(error["loc"]), error["msg"])
        return None
