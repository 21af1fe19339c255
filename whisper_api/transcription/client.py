"""TranscriptionClient — abstract base for speech-to-text backends."""
import os
from abc import ABC, abstractmethod
from typing import BinaryIO

from whisper_api.transcription.models import TranscribeResponse
from whisper_api.transcription.options import TranscribeOption, with_file


class TranscriptionClient(ABC):
    @abstractmethod
    def transcribe(self, stream: BinaryIO, *options: TranscribeOption) -> TranscribeResponse:
        """Transcribe an audio byte stream. Raises on failure."""
        ...

    def transcribe_file(
        self, path: str | os.PathLike, *options: TranscribeOption
    ) -> TranscribeResponse:
        """Open ``path`` and transcribe it, naming the upload after the file.

        The filename option goes first so explicit options can override it.
        """
        filename = os.path.basename(os.fspath(path))
        with open(path, "rb") as audio:
            return self.transcribe(audio, with_file(filename), *options)
