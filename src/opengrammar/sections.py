"""Split a model reply into its explanation and final-output sections.

The prompts ask for two labelled sections, but nothing forces the model to
comply, so this is best effort: when no output header is found the whole
reply is returned as comments.
"""

from __future__ import annotations

import re
from typing import List

from .prompts.templates import all_templates
from .types import ProcessedResult


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


EXPLANATION_HEADERS = _unique([t.explanation_header for t in all_templates()])
OUTPUT_HEADERS = _unique([t.output_header for t in all_templates()])


def _alternation(headers: List[str]) -> str:
    # Longest first so a header is never cut short by a prefix of another.
    return "|".join(re.escape(h + ":") for h in sorted(headers, key=len, reverse=True))


_SECTIONS_RE = re.compile(
    rf"^({_alternation(EXPLANATION_HEADERS)})([\s\S]*?)"
    rf"({_alternation(OUTPUT_HEADERS)})([\s\S]*)$",
    re.IGNORECASE,
)

_OUTPUT_MARKERS = [(h + ":").lower() for h in OUTPUT_HEADERS]


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def split_result(raw: str) -> ProcessedResult:
    match = _SECTIONS_RE.match(raw)
    if match:
        return ProcessedResult(
            comments=match.group(2).strip(),
            final_text=_strip_quotes(match.group(4).strip()),
            raw_result=raw,
        )

    # Fallback: the first line mentioning an output header starts the final text.
    lines = raw.split("\n")
    for i, line in enumerate(lines):
        lowered = line.lower()
        if any(marker in lowered for marker in _OUTPUT_MARKERS):
            return ProcessedResult(
                comments="\n".join(lines[:i]).strip(),
                final_text=_strip_quotes("\n".join(lines[i + 1 :]).strip()),
                raw_result=raw,
            )

    return ProcessedResult(comments=raw, final_text="", raw_result=raw)
