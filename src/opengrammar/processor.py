from __future__ import annotations

from typing import Optional

from opengrammar import logger as logger_mod

from .llm.anthropic_client import AnthropicClient
from .llm.base import CompletionClient
from .llm.extractor import extract_text
from .prompts.builder import build_prompt
from .types import ProcessRequest

log = logger_mod.get_logger()


def process_text(
    text: str,
    credential: str,
    action_type: str,
    language: str,
    *,
    client: Optional[CompletionClient] = None,
) -> str:
    """Run one text action through the completion API and return the reply text.

    Inputs are validated before anything else; a blank text or credential
    raises ValidationError and no request is made. Otherwise the prompt is
    rendered, sent once, and the first text segment of the reply is returned.

    Raises:
        ValidationError, SerializationError, TransportError, RemoteAPIError,
        ParseError, FormatError (all from :mod:`opengrammar.errors`).
    """

    request = ProcessRequest(
        text=text, credential=credential, action_type=action_type, language=language
    )
    request.validate()

    prompt = build_prompt(request.text, request.action_type, request.language)
    log.info(
        f"Processing text action={request.action_type[:40]!r} "
        f"language={request.language!r} chars={len(request.text)}"
    )

    client = client or AnthropicClient()
    body = client.send(prompt, request.credential)
    return extract_text(body)
