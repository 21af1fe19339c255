"""Error taxonomy for the Whisper client.

File-open failures surface as the builtin ``OSError`` raised by ``open()``.
Transport failures surface as ``httpx.TransportError`` (exported here as
``NetworkError``); neither is wrapped.
"""
import httpx

from whisper_api.constants import MSG_UNEXPECTED_RESPONSE

NetworkError = httpx.TransportError


class WhisperError(Exception):
    """Base class for every error raised by this package."""


class AuthError(WhisperError):
    """No API key was supplied and none was found in the environment."""


class ValidationError(WhisperError, ValueError):
    """The transcription request is incomplete (e.g. no filename)."""


class DecodeError(WhisperError, ValueError):
    """The response body is not a valid transcription JSON object."""


class RemoteError(WhisperError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, reason_phrase: str, body: bytes = b"") -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        super().__init__(MSG_UNEXPECTED_RESPONSE % self.status)

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()
