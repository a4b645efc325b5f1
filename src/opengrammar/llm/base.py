from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from opengrammar import config


@dataclass(frozen=True)
class LLMConfig:
    url: str = config.ANTHROPIC_MESSAGES_URL
    model: str = config.ANTHROPIC_MODEL
    max_tokens: int = config.ANTHROPIC_MAX_TOKENS
    api_version: str = config.ANTHROPIC_API_VERSION


class CompletionClient(Protocol):
    """Anything that can turn a rendered prompt into a raw response body."""

    def send(self, prompt: str, credential: str) -> bytes:
        raise NotImplementedError
