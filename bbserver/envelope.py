"""
Response envelope decoding for bbserver.

Response types are pydantic models (see ``bbserver.types``). ``decode`` turns
a raw body into such a model, keeping two failure modes apart:

- the body is not a JSON object, or a field has the wrong JSON type -> DecodeError
- the body parsed but required fields are absent or null -> SchemaError

Bitbucket returns evolving payloads, so unknown fields are ignored.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from bbserver.exceptions import DecodeError, SchemaError

M = TypeVar("M", bound=BaseModel)


def decode(raw: bytes | str, model: type[M]) -> M:
    """
    Decode a response body into ``model``.

    Args:
        raw: Raw response body
        model: Response model to validate against

    Returns:
        Populated instance of ``model``

    Raises:
        DecodeError: If the body is not a JSON object matching the field types
        SchemaError: If any required field (at any depth) is missing
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw

    try:
        payload = json.loads(text)
    except ValueError as e:
        raise DecodeError(str(e), text) from e

    if not isinstance(payload, dict):
        raise DecodeError(f"expected an object, got {type(payload).__name__}", text)

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        missing: list[str] = []
        wrong_type: list[str] = []
        for error in e.errors():
            location = _error_location(error)
            if _is_missing(error):
                missing.append(location)
            else:
                wrong_type.append(f"{location or 'response'}: {error['msg']}")

        if wrong_type:
            raise DecodeError("; ".join(wrong_type), text) from e
        raise SchemaError(missing, text) from e


def _is_missing(error: Any) -> bool:
    # null on a required field counts as absent
    return error["type"] == "missing" or error.get("input", ...) is None


def _error_location(error: Any) -> str:
    """
    Render a pydantic error location as a field path.

    ``("values", 1, "path", "toString")`` becomes ``values[1].path.toString``.
    Model-level errors name their field in ``ctx["field"]``.
    """
    parts = list(error["loc"])
    field = (error.get("ctx") or {}).get("field")
    if field:
        parts.append(field)

    location = ""
    for part in parts:
        if isinstance(part, int):
            location += f"[{part}]"
        elif location:
            location += f".{part}"
        else:
            location = str(part)
    return location
