"""Data types shared by every pipeline stage.

All of these are created once per analysis and never mutated afterwards.
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from .constants import (
    STEPS_PER_BEAT,
    BEATS_PER_BAR,
    KICK_NOTE,
    SNARE_NOTE,
    HIHAT_NOTE,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """Decoded mono audio."""

    samples: np.ndarray
    sample_rate: int

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")
        samples = np.array(self.samples, dtype=np.float32)
        if samples.ndim != 1:
            raise ValueError(f"Expected mono samples, got shape {samples.shape}")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return len(self.samples) / self.sample_rate

    def __len__(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class StepGrid:
    """Quantization grid for one loop."""

    beat_count: int
    steps_per_beat: int = STEPS_PER_BEAT
    beats_per_bar: int = BEATS_PER_BAR

    @property
    def step_count(self) -> int:
        return self.beat_count * self.steps_per_beat

    @property
    def bars(self) -> int:
        """Number of bar lines, counting a partial last bar."""
        return math.ceil(self.beat_count / self.beats_per_bar)

    def step_duration(self, bpm: float) -> float:
        """Length of one step in seconds at the given tempo."""
        return 60.0 / bpm / self.steps_per_beat


class Band(Enum):
    """Frequency bands used for classification."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


class StepEnergy(NamedTuple):
    rms: float
    peak: float


@dataclass(frozen=True, eq=False)
class EnergyProfile:
    """Normalized per-step RMS and peak for one band."""

    band: Band
    rms: np.ndarray
    peak: np.ndarray

    def __post_init__(self):
        if len(self.rms) != len(self.peak):
            raise ValueError("rms and peak must have the same length")

    def __len__(self) -> int:
        return len(self.rms)

    def __getitem__(self, step: int) -> StepEnergy:
        return StepEnergy(float(self.rms[step]), float(self.peak[step]))


class BandEnergies(NamedTuple):
    low: EnergyProfile
    mid: EnergyProfile
    high: EnergyProfile


class Instrument(Enum):
    """Drum instruments with their notation token and GM note."""

    KICK = ("bd", KICK_NOTE)
    SNARE = ("sd", SNARE_NOTE)
    HIHAT = ("hh", HIHAT_NOTE)

    def __init__(self, token: str, midi_note: int):
        self.token = token
        self.midi_note = midi_note


@dataclass(frozen=True)
class HitSequence:
    """One boolean per step for a single instrument."""

    instrument: Instrument
    hits: Tuple[bool, ...]

    def __post_init__(self):
        object.__setattr__(self, "hits", tuple(bool(h) for h in self.hits))

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.hits)

    @property
    def count(self) -> int:
        """Number of steps with a hit."""
        return sum(self.hits)

    @property
    def steps(self) -> Tuple[int, ...]:
        """Indices of steps with a hit."""
        return tuple(i for i, hit in enumerate(self.hits) if hit)


class DrumHits(NamedTuple):
    kick: HitSequence
    snare: HitSequence
    hihat: HitSequence


@dataclass(frozen=True)
class DrumPattern:
    """Summary statistics reported alongside the generated code."""

    bpm: int
    beats: int
    bars: int
    kicks: int
    snares: int
    hihats: int
    duration: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis produces."""

    pattern: DrumPattern
    code: str
    hits: DrumHits
    grid: StepGrid
    tempo: float
    sample_rate: int

    def to_dict(self) -> dict:
        return {"pattern": self.pattern.to_dict(), "code": self.code}
