"""Completion API access (Anthropic Messages API).

Design goals:
- Keep the wire format and HTTP details in one place.
- Return the raw body from the client; decoding and validation live in the extractor.
- Map every failure to a distinct error from :mod:`opengrammar.errors`.
"""

from .anthropic_client import AnthropicClient
from .base import CompletionClient, LLMConfig
from .extractor import extract_text, parse_completion
from .types import CompletionCall, CompletionResult, ContentSegment, LLMMessage, Usage

__all__ = [
    "AnthropicClient",
    "CompletionCall",
    "CompletionClient",
    "CompletionResult",
    "ContentSegment",
    "LLMConfig",
    "LLMMessage",
    "Usage",
    "extract_text",
    "parse_completion",
]
