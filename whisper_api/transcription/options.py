"""Per-call transcription options, applied in order (last write wins)."""
from dataclasses import dataclass, replace
from functools import reduce
from typing import Callable

from whisper_api.constants import DEFAULT_MODEL


@dataclass(frozen=True)
class TranscribeConfig:
    model: str = ""
    language: str = ""
    filename: str = ""


TranscribeOption = Callable[[TranscribeConfig], TranscribeConfig]


def with_model(model: str) -> TranscribeOption:
    return lambda config: replace(config, model=model)


def with_language(language: str) -> TranscribeOption:
    return lambda config: replace(config, language=language)


def with_file(filename: str) -> TranscribeOption:
    return lambda config: replace(config, filename=filename)


def build_transcribe_config(*options: TranscribeOption) -> TranscribeConfig:
    config = reduce(lambda acc, opt: opt(acc), options, TranscribeConfig())
    match config.model:
        case "":
            return replace(config, model=DEFAULT_MODEL)
        case _:
            return config
