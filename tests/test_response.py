import gzip
import json
import logging
import zlib

import httpx
import pytest

from whisper_api.errors import DecodeError, RemoteError
from whisper_api.transcription.response import decode_response, decompressor_for, read_body

PAYLOAD = {"task": "transcribe", "language": "english", "duration": 1.5, "text": "hi"}


def make_response(status: int = 200, body: bytes = b"", encoding: str | None = None) -> httpx.Response:
    """Streamed response whose raw bytes have not been read yet."""
    headers = {"Content-Encoding": encoding} if encoding else {}
    return httpx.Response(status, headers=headers, stream=httpx.ByteStream(body))


def raw_deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


# ── decompressor selection ────────────────────────────────────────────────────


@pytest.mark.parametrize("encoding", ["", "identity", "br", "x-unknown"])
def test_unknown_encoding_passes_through(encoding):
    assert decompressor_for(encoding) is None


@pytest.mark.parametrize("encoding", ["gzip", "GZIP", " Gzip "])
def test_gzip_selected_case_insensitively(encoding):
    data = b"hello"
    assert decompressor_for(encoding).decompress(gzip.compress(data)) == data


def test_deflate_is_raw():
    data = b"hello"
    assert decompressor_for("Deflate").decompress(raw_deflate(data)) == data


# ── read_body ─────────────────────────────────────────────────────────────────


def test_read_body_identity():
    assert read_body(make_response(body=b"plain")) == b"plain"


def test_read_body_gzip():
    assert read_body(make_response(body=gzip.compress(b"zipped"), encoding="gzip")) == b"zipped"


def test_read_body_raw_deflate():
    assert read_body(make_response(body=raw_deflate(b"deflated"), encoding="deflate")) == b"deflated"


def test_read_body_rejects_zlib_wrapped_deflate():
    """Only raw deflate is accepted; zlib-framed deflate is a decode failure."""
    with pytest.raises(DecodeError):
        read_body(make_response(body=zlib.compress(b"framed"), encoding="deflate"))


def test_read_body_corrupt_gzip():
    with pytest.raises(DecodeError):
        read_body(make_response(body=b"not gzip at all", encoding="gzip"))


def test_read_body_already_loaded_response():
    response = httpx.Response(200, content=b"loaded")
    response.read()

    assert read_body(response) == b"loaded"


# ── decode_response ───────────────────────────────────────────────────────────


def test_decode_success():
    result = decode_response(make_response(body=json.dumps(PAYLOAD).encode()))

    assert result.task == "transcribe"
    assert result.language == "english"
    assert result.duration == 1.5
    assert result.text == "hi"


def test_decode_gzip_success():
    body = gzip.compress(json.dumps(PAYLOAD).encode())

    assert decode_response(make_response(body=body, encoding="gzip")).text == "hi"


def test_decode_error_status_raises_remote_error(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(RemoteError) as exc_info:
            decode_response(make_response(500, body=b"<html>boom</html>"))

    assert exc_info.value.status_code == 500
    assert "500 Internal Server Error" in str(exc_info.value)
    assert exc_info.value.body == b"<html>boom</html>"
    assert "<html>boom</html>" in caplog.text


def test_decode_error_status_body_is_decompressed():
    body = gzip.compress(b'{"error": {"message": "bad key"}}')

    with pytest.raises(RemoteError) as exc_info:
        decode_response(make_response(401, body=body, encoding="gzip"))

    assert exc_info.value.body == b'{"error": {"message": "bad key"}}'
    assert exc_info.value.reason_phrase == "Unauthorized"


def test_decode_error_status_with_corrupt_compression_still_remote_error():
    with pytest.raises(RemoteError):
        decode_response(make_response(502, body=b"garbage", encoding="gzip"))


def test_decode_invalid_json():
    with pytest.raises(DecodeError):
        decode_response(make_response(body=b"{not json"))


def test_decode_non_object_json():
    with pytest.raises(DecodeError, match="list"):
        decode_response(make_response(body=b"[1, 2]"))


def test_decode_wrong_field_type():
    with pytest.raises(DecodeError):
        decode_response(make_response(body=b'{"duration": "long"}'))


def test_decode_null_text_is_empty_string():
    result = decode_response(make_response(body=b'{"text": null, "duration": null}'))

    assert result.text == ""
    assert result.duration == 0.0


def test_decode_wrong_string_type():
    with pytest.raises(DecodeError, match="text"):
        decode_response(make_response(body=b'{"text": 5}'))
