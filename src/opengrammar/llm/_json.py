from __future__ import annotations

import json
from typing import Any

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from ..errors import ParseError

_NULLABLE_STRING = {"type": ["string", "null"]}
_NULLABLE_INT = {"type": ["integer", "null"]}

# Shape of a Messages API reply. Everything is optional; only types are checked.
COMPLETION_RESULT_SCHEMA: dict[str, Any] = {
    "type": ["object", "null"],
    "properties": {
        "content": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "type": _NULLABLE_STRING,
                    "text": _NULLABLE_STRING,
                },
            },
        },
        "id": _NULLABLE_STRING,
        "model": _NULLABLE_STRING,
        "role": _NULLABLE_STRING,
        "stop_reason": _NULLABLE_STRING,
        "stop_sequence": _NULLABLE_STRING,
        "type": _NULLABLE_STRING,
        "usage": {
            "type": ["object", "null"],
            "properties": {
                "input_tokens": _NULLABLE_INT,
                "output_tokens": _NULLABLE_INT,
            },
        },
    },
}


def parse_json(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (ValueError, TypeError, RecursionError) as e:
        raise ParseError(f"error parsing response: {e}") from e


def validate_json(instance: Any, schema: dict[str, Any]) -> None:
    try:
        validate(instance=instance, schema=schema)
    except _SchemaValidationError as e:
        raise ParseError(f"error parsing response: {e.message}") from e
