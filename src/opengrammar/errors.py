class OpenGrammarError(RuntimeError):
    """Base error for opengrammar."""


class ValidationError(OpenGrammarError):
    """Input was rejected before any request was made."""


class SerializationError(OpenGrammarError):
    """The completion request could not be encoded."""


class TransportError(OpenGrammarError):
    """The request could not be built or the network call failed."""


class RemoteAPIError(OpenGrammarError):
    """The API answered with a status other than 200 OK."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API request failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ParseError(OpenGrammarError):
    """The response body is not JSON of the expected shape."""


class FormatError(OpenGrammarError):
    """The response parsed but carries no usable text segment."""
