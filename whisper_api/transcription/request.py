"""Request builder — URL joining and the multipart upload request."""
from typing import BinaryIO

import httpx

from whisper_api.constants import (
    AUTH_SCHEME,
    DEFAULT_BASE_URL,
    FIELD_FILE,
    FIELD_MODEL,
    FIELD_RESPONSE_FORMAT,
    FILE_CONTENT_TYPE,
    HEADER_ACCEPT,
    HEADER_ACCEPT_ENCODING,
    HEADER_ACCEPT_ENCODING_NAME,
    HEADER_ACCEPT_NAME,
    HEADER_AUTHORIZATION_NAME,
    HTTP_METHOD,
    RESPONSE_FORMAT,
    SCHEME_SEPARATOR,
)
from whisper_api.transcription.options import TranscribeConfig


def build_url(base_url: str, rel_path: str) -> str:
    """Join base and relative path with exactly one slash; absolute URLs pass through."""
    if SCHEME_SEPARATOR in rel_path:
        return rel_path
    base = base_url or DEFAULT_BASE_URL
    return base.rstrip("/") + "/" + rel_path.lstrip("/")


def build_transcription_request(
    url: str,
    api_key: str,
    config: TranscribeConfig,
    stream: BinaryIO,
) -> httpx.Request:
    """Multipart POST: ``model``, ``response_format`` and the audio as ``file``.

    The upload holds the bytes remaining in ``stream`` from its current
    position. ``config.language`` is not sent.
    """
    return httpx.Request(
        HTTP_METHOD,
        url,
        data={
            FIELD_MODEL: config.model,
            FIELD_RESPONSE_FORMAT: RESPONSE_FORMAT,
        },
        files={FIELD_FILE: (config.filename, stream.read(), FILE_CONTENT_TYPE)},
        headers={
            HEADER_ACCEPT_ENCODING_NAME: HEADER_ACCEPT_ENCODING,
            HEADER_ACCEPT_NAME: HEADER_ACCEPT,
            HEADER_AUTHORIZATION_NAME: f"{AUTH_SCHEME} {api_key}",
        },
    )
