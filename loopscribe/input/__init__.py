"""Input layer - Audio decoding."""

from .decoder import AudioDecoder, DecodingSession

__all__ = [
    "AudioDecoder",
    "DecodingSession",
]
