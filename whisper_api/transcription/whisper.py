"""WhisperTranscriptionClient — OpenAI-compatible Whisper speech-to-text backend."""
import logging
from typing import BinaryIO, Mapping, Optional

import httpx

from whisper_api.config import ClientConfig, ClientOption
from whisper_api.constants import (
    ENCODING_IDENTITY,
    HEADER_CONTENT_ENCODING_NAME,
    HEADER_CONTENT_LENGTH_NAME,
    MSG_MISSING_API_KEY,
    MSG_MISSING_FILENAME,
    MSG_REQUEST,
    MSG_RESPONSE,
    TRANSCRIPTIONS_PATH,
    UNKNOWN_LENGTH,
)
from whisper_api.errors import AuthError, ValidationError
from whisper_api.transcription.client import TranscriptionClient
from whisper_api.transcription.models import TranscribeResponse
from whisper_api.transcription.options import TranscribeOption, build_transcribe_config
from whisper_api.transcription.request import build_transcription_request, build_url
from whisper_api.transcription.response import decode_response

logger = logging.getLogger(__name__)


class WhisperTranscriptionClient(TranscriptionClient):
    """Client for ``POST {base}/audio/transcriptions``.

    Configuration is resolved once here and never changes afterwards, so one
    instance can serve any number of calls.
    """

    def __init__(
        self,
        *options: ClientOption,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._config = ClientConfig.build(*options, environ=environ)
        match self._config.http_client:
            case None:
                self._http = httpx.Client(timeout=self._config.timeout)
                self._owns_http = True
            case http_client:
                self._http = http_client
                self._owns_http = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_url(self, rel_path: str) -> str:
        return build_url(self._config.base_url, rel_path)

    def transcribe(self, stream: BinaryIO, *options: TranscribeOption) -> TranscribeResponse:
        if not self._config.api_key:
            raise AuthError(MSG_MISSING_API_KEY)

        config = build_transcribe_config(*options)
        if not config.filename:
            raise ValidationError(MSG_MISSING_FILENAME)

        url = self.build_url(TRANSCRIPTIONS_PATH)
        request = build_transcription_request(url, self._config.api_key, config, stream)
        logger.debug(MSG_REQUEST, url, config.model, config.filename)

        response = self._http.send(request, stream=True)
        try:
            logger.debug(
                MSG_RESPONSE,
                response.status_code,
                response.headers.get(HEADER_CONTENT_LENGTH_NAME, UNKNOWN_LENGTH),
                response.headers.get(HEADER_CONTENT_ENCODING_NAME, ENCODING_IDENTITY),
            )
            return decode_response(response)
        finally:
            response.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "WhisperTranscriptionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
