import json

import pytest

from opengrammar import (
    AnthropicClient,
    FormatError,
    ParseError,
    RemoteAPIError,
    TransportError,
    ValidationError,
    build_prompt,
    process_text,
)


class RecordingClient:
    def __init__(self, body: bytes = b""):
        self.body = body
        self.calls: list[tuple[str, str]] = []

    def send(self, prompt: str, credential: str) -> bytes:
        self.calls.append((prompt, credential))
        return self.body


@pytest.mark.parametrize("text", ["", " ", "\t\n", "   \r\n  "])
def test_blank_text_is_rejected_before_any_request(text):
    client = RecordingClient()

    with pytest.raises(ValidationError, match="text cannot be empty"):
        process_text(text, "sk-test", "grammar", "en", client=client)

    assert client.calls == []


@pytest.mark.parametrize("credential", ["", " ", "\n\t"])
def test_blank_credential_is_rejected_before_any_request(credential):
    client = RecordingClient()

    with pytest.raises(ValidationError, match="API key is required"):
        process_text("Hello", credential, "grammar", "en", client=client)

    assert client.calls == []


def test_blank_text_never_touches_the_network(monkeypatch):
    def _boom(*_a, **_k):
        raise AssertionError("network must not be used")

    monkeypatch.setattr("requests.Session.send", _boom)

    with pytest.raises(ValidationError):
        process_text("   ", "sk-test", "grammar", "en")


def test_success_returns_first_text_segment(api_reply):
    client = RecordingClient(api_reply())

    assert process_text("I has a apple.", "sk-test", "grammar", "en", client=client) == "Hello"

    prompt, credential = client.calls[0]
    assert prompt == build_prompt("I has a apple.", "grammar", "en")
    assert credential == "sk-test"


def test_text_is_sent_as_given_not_trimmed(api_reply):
    client = RecordingClient(api_reply())

    process_text("  padded  ", "sk-test", "improve", "id", client=client)

    assert '"  padded  "' in client.calls[0][0]


def test_end_to_end_over_requests_session(fake_session, api_reply):
    session = fake_session(200, api_reply(content=[{"type": "text", "text": "Done"}]))

    result = process_text(
        "hello", "sk-test", "Summarize", "en", client=AnthropicClient(session=session)
    )

    assert result == "Done"
    sent = json.loads(session.sent[0].body)
    assert "Instruction: Summarize" in sent["messages"][0]["content"]


def test_empty_content_fails_with_format_error():
    with pytest.raises(FormatError):
        process_text("hello", "k", "grammar", "en", client=RecordingClient(b'{"content":[]}'))


def test_rate_limited_reply_fails_with_remote_api_error(fake_session):
    client = AnthropicClient(session=fake_session(429, "rate limited"))

    with pytest.raises(RemoteAPIError) as exc_info:
        process_text("hello", "k", "grammar", "en", client=client)

    assert exc_info.value.status_code == 429
    assert exc_info.value.body == "rate limited"


def test_invalid_json_fails_with_parse_error(fake_session):
    client = AnthropicClient(session=fake_session(200, "<html>oops</html>"))

    with pytest.raises(ParseError):
        process_text("hello", "k", "grammar", "en", client=client)


def test_transport_errors_propagate_unchanged():
    class FailingClient:
        def send(self, prompt, credential):
            raise TransportError("error making request: boom")

    with pytest.raises(TransportError, match="boom"):
        process_text("hello", "k", "grammar", "en", client=FailingClient())


def test_all_errors_share_a_common_base():
    from opengrammar.errors import OpenGrammarError, SerializationError

    for cls in (
        ValidationError,
        SerializationError,
        TransportError,
        RemoteAPIError,
        ParseError,
        FormatError,
    ):
        assert issubclass(cls, OpenGrammarError)
        assert issubclass(cls, RuntimeError)
