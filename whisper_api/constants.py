"""All magic values live here — no inline literals anywhere else."""

# Remote API
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "whisper-1"
TRANSCRIPTIONS_PATH = "audio/transcriptions"
RESPONSE_FORMAT = "verbose_json"
SCHEME_SEPARATOR = "://"

# Multipart field names
FIELD_MODEL = "model"
FIELD_RESPONSE_FORMAT = "response_format"
FIELD_FILE = "file"
FILE_CONTENT_TYPE = "application/octet-stream"

# Request
HTTP_METHOD = "POST"
HEADER_ACCEPT_NAME = "Accept"
HEADER_ACCEPT_ENCODING_NAME = "Accept-Encoding"
HEADER_AUTHORIZATION_NAME = "Authorization"
HEADER_ACCEPT = "*/*"
HEADER_ACCEPT_ENCODING = "gzip, deflate"
AUTH_SCHEME = "Bearer"

# Response
HEADER_CONTENT_ENCODING_NAME = "Content-Encoding"
HEADER_CONTENT_LENGTH_NAME = "Content-Length"
ENCODING_IDENTITY = "identity"
UNKNOWN_LENGTH = "?"
BODY_CHARSET = "utf-8"
BODY_DECODE_ERRORS = "replace"
ENCODING_GZIP = "gzip"
ENCODING_DEFLATE = "deflate"

# Environment
ENV_API_KEY = "OPENAI_API_KEY"
ENV_BASE_URL = "OPENAI_BASE_URL"
ENV_LOG_LEVEL = "WHISPER_LOG_LEVEL"
ENV_TIMEOUT = "WHISPER_TIMEOUT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEOUT: float = 60.0

# CLI
DEFAULT_AUDIO_FILE = "file.m4a"

# Log / error messages
MSG_MISSING_API_KEY = f"missing API key (set {ENV_API_KEY} in env)"
MSG_MISSING_FILENAME = "filename is not set"
MSG_UNEXPECTED_RESPONSE = "unexpected response: %s"
MSG_DECODE_FAILED = "could not decode transcription response: %s"
MSG_NOT_AN_OBJECT = "expected a JSON object, got %s"
MSG_BAD_TIMEOUT = f"{ENV_TIMEOUT} must be a positive number"
MSG_REQUEST = "→ POST %s (model=%s, file=%s)"
MSG_RESPONSE = "← %s (%s bytes, encoding=%s)"
MSG_ERROR_BODY = "Error response body (%s): %s"
MSG_ERROR_BODY_UNREADABLE = "Could not decompress error body: %s"
MSG_WRONG_TYPE = "field %r: expected %s, got %s"
MSG_TRANSCRIPTION = "Transcription: %s"
MSG_TRANSCRIBE_FAILED = "Error transcribing file: %s"
