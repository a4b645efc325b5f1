from __future__ import annotations

from opengrammar import logger as logger_mod

from ..errors import FormatError
from ._json import COMPLETION_RESULT_SCHEMA, parse_json, validate_json
from .types import CompletionResult

log = logger_mod.get_logger()


def parse_completion(body: bytes | str) -> CompletionResult:
    """Decode a raw Messages API body into a :class:`CompletionResult`.

    Raises ParseError when the body is not JSON or has the wrong shape.
    """

    data = parse_json(body)
    validate_json(data, COMPLETION_RESULT_SCHEMA)
    return CompletionResult.from_dict(data)


def extract_text(body: bytes | str) -> str:
    """Return the text of the first content segment.

    Only the first segment is considered. If it is missing or is not a text
    segment the response is rejected, even when later segments hold text.
    """

    result = parse_completion(body)
    if result.content and result.content[0].type == "text":
        return result.content[0].text

    log.error(
        f"❌ Unexpected response format: {len(result.content)} content segment(s), "
        f"stop_reason={result.stop_reason!r}"
    )
    raise FormatError("unexpected response format")
