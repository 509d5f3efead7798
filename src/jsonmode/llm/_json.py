from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as _PydanticValidationError

from .errors import LLMValidationError

T = TypeVar("T")


def parse_json(text: str) -> Any:
    """Parse JSON from a model response.

    Assumes the provider was instructed to return JSON only.
    """

    try:
        return json.loads(text)
    except Exception as e:  # noqa: BLE001
        raise LLMValidationError(f"Failed to parse JSON: {e}") from e


def decode_json(text: str, target_type: type[T]) -> T:
    """Parse `text` and validate the result into an instance of `target_type`.

    Unknown keys follow the target type's own pydantic config. With the
    default (`extra="ignore"`) they are dropped silently; declare
    `model_config = ConfigDict(extra="forbid")` to reject them.
    """

    data = parse_json(text)
    try:
        return TypeAdapter(target_type).validate_python(data)
    except _PydanticValidationError as e:
        name = getattr(target_type, "__name__", repr(target_type))
        raise LLMValidationError(
            f"JSON does not match {name}: {e.error_count()} error(s)\n{e}"
        ) from e
