"""Audio decoding: compressed bytes to a mono SampleBuffer."""

import io
import logging
from pathlib import Path
from typing import Optional, Union

import librosa
import numpy as np
import soundfile as sf
from librosa.util.exceptions import ParameterError

from ..core import SampleBuffer, DecodeError, SUPPORTED_FORMATS

logger = logging.getLogger(__name__)


class DecodingSession:
    """Owns the stream and sound file handle for one decode.

    Use as a context manager; the handles are released on every exit path.

        with DecodingSession(data) as session:
            buffer = session.read()
    """

    def __init__(self, data: bytes):
        self._data = data
        self._stream: Optional[io.BytesIO] = None
        self._sound: Optional[sf.SoundFile] = None

    def __enter__(self) -> "DecodingSession":
        if not self._data:
            raise DecodeError("No audio data provided")

        self._stream = io.BytesIO(self._data)
        try:
            self._sound = sf.SoundFile(self._stream)
        except (sf.SoundFileError, RuntimeError, TypeError) as e:
            self.close()
            raise DecodeError(
                f"Could not decode audio. Make sure it's a valid drum loop file ({e})"
            ) from e
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    @property
    def closed(self) -> bool:
        return self._sound is None and self._stream is None

    @property
    def duration(self) -> float:
        """Length in seconds from the file header, without decoding frames."""
        if self._sound is None:
            raise RuntimeError("DecodingSession is not open")
        return self._sound.frames / self._sound.samplerate

    def close(self) -> None:
        if self._sound is not None:
            self._sound.close()
            self._sound = None
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def read(self) -> SampleBuffer:
        """Read all frames and mix down to mono."""
        if self._sound is None:
            raise RuntimeError("DecodingSession is not open")

        try:
            frames = self._sound.read(dtype="float32", always_2d=True)
            audio = librosa.to_mono(np.ascontiguousarray(frames.T))
        except (sf.SoundFileError, RuntimeError, ParameterError) as e:
            raise DecodeError(f"Could not decode audio: {e}") from e

        if audio.size == 0:
            raise DecodeError("Audio contains no samples")

        sample_rate = int(self._sound.samplerate)
        logger.debug(
            "Decoded %d frames (%d channels) at %d Hz",
            len(audio), self._sound.channels, sample_rate,
        )
        return SampleBuffer(samples=audio, sample_rate=sample_rate)


class AudioDecoder:
    """Decodes audio bytes or files into SampleBuffers."""

    SUPPORTED_FORMATS = SUPPORTED_FORMATS

    def session(self, data: bytes) -> DecodingSession:
        """Open a scoped decoding session over raw bytes."""
        return DecodingSession(data)

    def decode(self, data: bytes) -> SampleBuffer:
        """
        Decode audio bytes.

        Args:
            data: Encoded audio (WAV, FLAC, OGG, MP3, AIFF)

        Returns:
            Mono SampleBuffer at the file's native sample rate

        Raises:
            DecodeError: If the bytes are empty, corrupt or unsupported
        """
        with self.session(data) as session:
            return session.read()

    def read_file(self, path: Union[str, Path]) -> bytes:
        """
        Read an audio file's bytes after checking its format.

        Raises:
            FileNotFoundError: If file doesn't exist
            DecodeError: If file format not supported
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise DecodeError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED_FORMATS))}"
            )

        return path.read_bytes()

    def load(self, path: Union[str, Path]) -> SampleBuffer:
        """Read and decode an audio file."""
        return self.decode(self.read_file(path))
