import json
import sys
from pathlib import Path

import pytest
import requests

# This repo uses a src/ layout; make the package importable without an
# editable install.
_SRC = str(Path(__file__).resolve().parents[1] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


def make_response(status: int, body: bytes | str) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    """Records prepared requests and replays a canned response or error."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.sent: list[requests.PreparedRequest] = []

    def send(self, prepared, **_kwargs):
        self.sent.append(prepared)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_session():
    """Fixture: factory for a FakeSession answering with (status, body) or an error."""

    def _factory(status: int = 200, body: bytes | str = b"", *, error=None):
        return FakeSession(response=make_response(status, body), error=error)

    return _factory


@pytest.fixture
def api_reply():
    """Fixture: factory for a Messages API success body."""

    def _factory(content=None, **overrides) -> bytes:
        payload = {
            "content": (
                content if content is not None else [{"type": "text", "text": "Hello"}]
            ),
            "id": "msg_01",
            "model": "claude-3-haiku-20240307",
            "role": "assistant",
            "stop_reason": "end_turn",
            "stop_sequence": None,
            "type": "message",
            "usage": {"input_tokens": 12, "output_tokens": 3},
        }
        payload.update(overrides)
        return json.dumps(payload).encode("utf-8")

    return _factory
