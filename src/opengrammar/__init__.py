"""OpenGrammar text-processing core.

Renders an action prompt (grammar, improve, rephrase, formal, detailed, or a
free-form instruction), sends it to the Anthropic Messages API, and returns
the generated text:

    from opengrammar import process_text

    reply = process_text("their going home", api_key, "grammar", "en")
"""

from .errors import (
    FormatError,
    OpenGrammarError,
    ParseError,
    RemoteAPIError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .llm import AnthropicClient, CompletionClient, LLMConfig, extract_text
from .processor import process_text
from .prompts import action_options, build_prompt
from .sections import split_result
from .types import ProcessedResult, ProcessRequest

__all__ = [
    "AnthropicClient",
    "CompletionClient",
    "FormatError",
    "LLMConfig",
    "OpenGrammarError",
    "ParseError",
    "ProcessRequest",
    "ProcessedResult",
    "RemoteAPIError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "action_options",
    "build_prompt",
    "extract_text",
    "process_text",
    "split_result",
]
