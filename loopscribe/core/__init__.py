"""Core types, constants, configuration and errors for loopscribe."""

from .types import (
    SampleBuffer,
    StepGrid,
    Band,
    StepEnergy,
    EnergyProfile,
    BandEnergies,
    Instrument,
    HitSequence,
    DrumHits,
    DrumPattern,
    AnalysisResult,
    round_half_up,
)
from .config import (
    AnalysisConfig,
    TempoConfig,
    BandFilterConfig,
    ClassifierThresholds,
)
from .errors import (
    LoopAnalysisError,
    DecodeError,
    DurationError,
    BeatCountError,
)
from .constants import (
    MAX_DURATION,
    DEFAULT_TEMPO,
    STEPS_PER_BEAT,
    BEATS_PER_BAR,
    SUPPORTED_FORMATS,
)

__all__ = [
    "SampleBuffer",
    "StepGrid",
    "Band",
    "StepEnergy",
    "EnergyProfile",
    "BandEnergies",
    "Instrument",
    "HitSequence",
    "DrumHits",
    "DrumPattern",
    "AnalysisResult",
    "round_half_up",
    "AnalysisConfig",
    "TempoConfig",
    "BandFilterConfig",
    "ClassifierThresholds",
    "LoopAnalysisError",
    "DecodeError",
    "DurationError",
    "BeatCountError",
    "MAX_DURATION",
    "DEFAULT_TEMPO",
    "STEPS_PER_BEAT",
    "BEATS_PER_BAR",
    "SUPPORTED_FORMATS",
]
