from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class CompletionCall:
    """Request body for one Messages API call."""

    model: str
    max_tokens: int
    messages: tuple[LLMMessage, ...]

    @classmethod
    def for_prompt(cls, prompt: str, *, model: str, max_tokens: int) -> "CompletionCall":
        return cls(
            model=model,
            max_tokens=max_tokens,
            messages=(LLMMessage(role="user", content=prompt),),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
        }


@dataclass(frozen=True)
class ContentSegment:
    type: str
    text: str


@dataclass(frozen=True)
class Usage:
    input_tokens: int = 0
    output_tokens: int = 0


def _s(data: dict[str, Any], key: str) -> str:
    v = data.get(key)
    return "" if v is None else str(v)


@dataclass(frozen=True)
class CompletionResult:
    """Parsed Messages API response.

    Only ``content`` is consumed downstream; the rest is kept for callers
    that want to inspect it.
    """

    content: tuple[ContentSegment, ...] = ()
    id: str = ""
    model: str = ""
    role: str = ""
    stop_reason: str = ""
    stop_sequence: str = ""
    type: str = ""
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "CompletionResult":
        data = data or {}
        segments = tuple(
            ContentSegment(type=_s(item, "type"), text=_s(item, "text"))
            for item in (data.get("content") or [])
        )
        usage = data.get("usage") or {}
        return cls(
            content=segments,
            id=_s(data, "id"),
            model=_s(data, "model"),
            role=_s(data, "role"),
            stop_reason=_s(data, "stop_reason"),
            stop_sequence=_s(data, "stop_sequence"),
            type=_s(data, "type"),
            usage=Usage(
                input_tokens=int(usage.get("input_tokens") or 0),
                output_tokens=int(usage.get("output_tokens") or 0),
            ),
        )
