"""Exceptions raised by the analysis pipeline.

Every error here is fatal for the invocation that raised it. Callers get
the message verbatim; nothing is retried.
"""

from .constants import MAX_DURATION, MIN_BEATS, MAX_BEATS


class LoopAnalysisError(Exception):
    """Base class for loop analysis failures."""


class DecodeError(LoopAnalysisError, ValueError):
    """Audio bytes could not be decoded (corrupt or unsupported)."""


class DurationError(LoopAnalysisError):
    """Loop is longer than the supported maximum."""

    def __init__(self, duration: float, max_duration: float = MAX_DURATION):
        self.duration = duration
        self.max_duration = max_duration
        super().__init__(
            "File is too long! Please use loops of 1-4 bars "
            f"(typically under {max_duration:g} seconds)."
        )


class BeatCountError(LoopAnalysisError):
    """Detected beat count is outside the accepted range."""

    def __init__(
        self,
        beat_count: int,
        min_beats: int = MIN_BEATS,
        max_beats: int = MAX_BEATS,
    ):
        self.beat_count = beat_count
        self.min_beats = min_beats
        self.max_beats = max_beats
        super().__init__(
            f"Detected {beat_count} beats - should be {min_beats}-{max_beats} "
            "beats. Try a different loop."
        )
