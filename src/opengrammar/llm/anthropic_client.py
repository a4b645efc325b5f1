from __future__ import annotations

import json
from typing import Optional

import requests

from opengrammar import logger as logger_mod

from ..errors import RemoteAPIError, SerializationError, TransportError
from .base import CompletionClient, LLMConfig
from .types import CompletionCall

log = logger_mod.get_logger()


class AnthropicClient(CompletionClient):
    """Single-shot client for the Anthropic Messages API.

    One POST per call, no retries, and no timeout beyond what ``requests``
    does by default. A session may be injected; otherwise a fresh one is
    opened and closed around each call.
    """

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._cfg = config or LLMConfig()
        self._session = session

    def build_call(self, prompt: str) -> CompletionCall:
        return CompletionCall.for_prompt(
            prompt, model=self._cfg.model, max_tokens=self._cfg.max_tokens
        )

    def _headers(self, credential: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-Key": credential,
            "anthropic-version": self._cfg.api_version,
        }

    def _encode(self, call: CompletionCall) -> bytes:
        try:
            return json.dumps(call.to_dict(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            log.error(f"❌ Could not serialize completion request: {e}")
            raise SerializationError(f"error marshaling request: {e}") from e

    def _post(self, prepared: requests.PreparedRequest) -> requests.Response:
        if self._session is not None:
            return self._session.send(prepared)
        with requests.Session() as session:
            return session.send(prepared)

    def send(self, prompt: str, credential: str) -> bytes:
        payload = self._encode(self.build_call(prompt))

        try:
            # Header values go out as Latin-1; reject anything else before sending.
            credential.encode("latin-1")
            prepared = requests.Request(
                "POST", self._cfg.url, data=payload, headers=self._headers(credential)
            ).prepare()
        except (requests.exceptions.RequestException, ValueError) as e:
            log.error(f"❌ Could not build request for {self._cfg.url}: {e}")
            raise TransportError(f"error creating request: {e}") from e

        log.debug(
            f"Sending completion request model={self._cfg.model} "
            f"max_tokens={self._cfg.max_tokens} prompt_chars={len(prompt)}"
        )
        try:
            resp = self._post(prepared)
            body = resp.content
        except requests.exceptions.RequestException as e:
            log.error(f"❌ Request to {self._cfg.url} failed: {e}")
            raise TransportError(f"error making request: {e}") from e

        if resp.status_code != requests.codes.ok:
            text = body.decode("utf-8", errors="replace")
            log.error(f"❌ Completion API returned HTTP {resp.status_code}")
            raise RemoteAPIError(resp.status_code, text)

        log.debug(f"✅ Completion API returned {len(body)} bytes")
        return body
