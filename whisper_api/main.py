"""Entry point — wires Settings → WhisperTranscriptionClient → stdout."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler

from whisper_api.config import Settings, with_timeout
from whisper_api.constants import DEFAULT_AUDIO_FILE, MSG_TRANSCRIBE_FAILED, MSG_TRANSCRIPTION
from whisper_api.transcription.options import with_language, with_model
from whisper_api.transcription.whisper import WhisperTranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transcribe an audio file with Whisper.")
    parser.add_argument("file", nargs="?", default=DEFAULT_AUDIO_FILE)
    parser.add_argument("--model", default="")
    parser.add_argument("--language", default="")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = Settings.from_env()
        _setup_logging(settings.log_level)

        # API key and base URL come from OPENAI_API_KEY / OPENAI_BASE_URL
        with WhisperTranscriptionClient(with_timeout(settings.timeout)) as client:
            response = client.transcribe_file(
                args.file, with_model(args.model), with_language(args.language)
            )
    except Exception as exc:
        logger.critical(MSG_TRANSCRIBE_FAILED, exc)
        sys.exit(1)

    print(MSG_TRANSCRIPTION % response.text)


if __name__ == "__main__":
    main()
