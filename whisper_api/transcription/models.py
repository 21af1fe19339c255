from dataclasses import dataclass
from typing import Any, Mapping

from whisper_api.constants import MSG_WRONG_TYPE

# JSON null and missing keys decode to the zero value; any other type
# mismatch raises TypeError.


def _check(raw: Mapping[str, Any], key: str, expected: str, ok) -> Any:
    value = raw.get(key)
    if value is not None and not ok(value):
        raise TypeError(MSG_WRONG_TYPE % (key, expected, type(value).__name__))
    return value


def _str(raw: Mapping[str, Any], key: str) -> str:
    value = _check(raw, key, "string", lambda v: isinstance(v, str))
    return "" if value is None else value


def _int(raw: Mapping[str, Any], key: str) -> int:
    value = _check(raw, key, "integer", lambda v: isinstance(v, int) and not isinstance(v, bool))
    return 0 if value is None else value


def _float(raw: Mapping[str, Any], key: str) -> float:
    value = _check(
        raw, key, "number", lambda v: isinstance(v, (int, float)) and not isinstance(v, bool)
    )
    return 0.0 if value is None else float(value)


def _bool(raw: Mapping[str, Any], key: str) -> bool:
    value = _check(raw, key, "boolean", lambda v: isinstance(v, bool))
    return False if value is None else value


def _list(raw: Mapping[str, Any], key: str) -> list:
    value = _check(raw, key, "array", lambda v: isinstance(v, list))
    return [] if value is None else value


@dataclass(frozen=True)
class Segment:
    id: int
    seek: int
    start: float
    end: float
    text: str
    tokens: tuple[int, ...]
    temperature: float
    avg_logprob: float
    compression_ratio: float
    no_speech_prob: float
    transient: bool

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Segment":
        if not isinstance(raw, Mapping):
            raise TypeError(MSG_WRONG_TYPE % ("segments", "object", type(raw).__name__))
        tokens = _list(raw, "tokens")
        return cls(
            id=_int(raw, "id"),
            seek=_int(raw, "seek"),
            start=_float(raw, "start"),
            end=_float(raw, "end"),
            text=_str(raw, "text"),
            tokens=tuple(_int({"tokens": t}, "tokens") for t in tokens),
            temperature=_float(raw, "temperature"),
            avg_logprob=_float(raw, "avg_logprob"),
            compression_ratio=_float(raw, "compression_ratio"),
            no_speech_prob=_float(raw, "no_speech_prob"),
            transient=_bool(raw, "transient"),
        )


@dataclass(frozen=True)
class TranscribeResponse:
    """Decoded ``verbose_json`` transcription result."""
    task: str
    language: str
    duration: float
    text: str
    segments: tuple[Segment, ...]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TranscribeResponse":
        return cls(
            task=_str(raw, "task"),
            language=_str(raw, "language"),
            duration=_float(raw, "duration"),
            text=_str(raw, "text"),
            segments=tuple(map(Segment.from_dict, _list(raw, "segments"))),
        )
