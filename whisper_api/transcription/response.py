"""Response decoder — Content-Encoding handling and JSON decoding."""
import json
import logging
import zlib

import httpx

from whisper_api import constants
from whisper_api.constants import (
    BODY_CHARSET,
    BODY_DECODE_ERRORS,
    HEADER_CONTENT_ENCODING_NAME,
    MSG_DECODE_FAILED,
    MSG_ERROR_BODY,
    MSG_ERROR_BODY_UNREADABLE,
    MSG_NOT_AN_OBJECT,
)
from whisper_api.errors import DecodeError, RemoteError
from whisper_api.transcription.models import TranscribeResponse

logger = logging.getLogger(__name__)

_GZIP_WBITS = 16 + zlib.MAX_WBITS
# Raw deflate stream, no zlib header or checksum.
_RAW_DEFLATE_WBITS = -zlib.MAX_WBITS


def decompressor_for(content_encoding: str):
    """Return a zlib decompress object for the encoding, or None for pass-through."""
    match content_encoding.strip().lower():
        case constants.ENCODING_GZIP:
            return zlib.decompressobj(_GZIP_WBITS)
        case constants.ENCODING_DEFLATE:
            return zlib.decompressobj(_RAW_DEFLATE_WBITS)
        case _:
            return None


def read_body(response: httpx.Response) -> bytes:
    """Read the body, undoing gzip/deflate according to Content-Encoding."""
    # Non-streamed responses were already loaded and decoded by httpx.
    if response.is_stream_consumed:
        return response.content

    encoding = response.headers.get(HEADER_CONTENT_ENCODING_NAME, "")
    decompressor = decompressor_for(encoding)
    raw = response.iter_raw()
    match decompressor:
        case None:
            return b"".join(raw)
        case _:
            try:
                return b"".join(map(decompressor.decompress, raw)) + decompressor.flush()
            except zlib.error as exc:
                raise DecodeError(MSG_DECODE_FAILED % exc) from exc


def _parse(body: bytes) -> TranscribeResponse:
    try:
        raw = json.loads(body)
    except ValueError as exc:
        raise DecodeError(MSG_DECODE_FAILED % exc) from exc

    match raw:
        case dict():
            pass
        case _:
            raise DecodeError(MSG_NOT_AN_OBJECT % type(raw).__name__)

    try:
        return TranscribeResponse.from_dict(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(MSG_DECODE_FAILED % exc) from exc


def decode_response(response: httpx.Response) -> TranscribeResponse:
    """Decode a transcription response; any status but 200 raises RemoteError."""
    match response.status_code:
        case 200:
            return _parse(read_body(response))
        case status:
            try:
                body = read_body(response)
            except DecodeError as exc:
                logger.warning(MSG_ERROR_BODY_UNREADABLE, exc)
                body = b""
            logger.error(
                MSG_ERROR_BODY, status, body.decode(BODY_CHARSET, errors=BODY_DECODE_ERRORS)
            )
            raise RemoteError(status, response.reason_phrase, body)
