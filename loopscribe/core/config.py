"""Configuration dataclasses for the analysis pipeline."""

from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    MAX_DURATION,
    DEFAULT_TEMPO,
    DEFAULT_FRAME_LENGTH,
    DEFAULT_HOP_LENGTH,
    PEAK_THRESHOLD_RATIO,
    MIN_TEMPO_PEAKS,
    MIN_ONSET_INTERVAL,
    MAX_ONSET_INTERVAL,
    TEMPO_RANGE,
    STEPS_PER_BEAT,
    BEATS_PER_BAR,
    MIN_BEATS,
    MAX_BEATS,
    LOW_CUTOFF,
    MID_CENTER,
    HIGH_CUTOFF,
    FILTER_Q,
)


@dataclass(frozen=True)
class TempoConfig:
    """Settings for onset-based tempo estimation.

    Attributes:
        frame_length: RMS window size in samples (default: 2048)
        hop_length: Samples between windows (default: 512)
        peak_threshold: Fraction of the curve maximum a peak must exceed (default: 0.3)
        min_peaks: Fewer peaks than this falls back to default_tempo (default: 4)
        min_interval: Shortest accepted inter-onset interval in seconds (default: 0.15)
        max_interval: Longest accepted inter-onset interval in seconds (default: 2.0)
        tempo_range: BPM range estimates are octave-folded into (default: 75-160)
        default_tempo: Fallback BPM (default: 120)
    """

    frame_length: int = DEFAULT_FRAME_LENGTH
    hop_length: int = DEFAULT_HOP_LENGTH
    peak_threshold: float = PEAK_THRESHOLD_RATIO
    min_peaks: int = MIN_TEMPO_PEAKS
    min_interval: float = MIN_ONSET_INTERVAL
    max_interval: float = MAX_ONSET_INTERVAL
    tempo_range: Tuple[float, float] = TEMPO_RANGE
    default_tempo: float = DEFAULT_TEMPO


@dataclass(frozen=True)
class BandFilterConfig:
    """One biquad filter: kind is lowpass, bandpass or highpass."""

    kind: str
    frequency: float
    q: float = FILTER_Q


@dataclass(frozen=True)
class ClassifierThresholds:
    """Per-instrument decision thresholds on normalized step energy."""

    kick_rms: float = 0.15
    kick_peak: float = 0.3
    kick_high_ratio: float = 1.5

    snare_rms: float = 0.15
    snare_peak: float = 0.25
    snare_max_low_rms: float = 0.4

    hihat_rms: float = 0.05
    hihat_peak: float = 0.1
    hihat_max_low_rms: float = 0.2
    hihat_max_mid_rms: float = 0.2


@dataclass(frozen=True)
class AnalysisConfig:
    """Top-level configuration for LoopAnalyzer.

    Attributes:
        max_duration: Longest accepted loop in seconds (default: 8.0)
        steps_per_beat: Quantization steps per quarter note (default: 8, 32nd notes)
        beats_per_bar: Beats per notation line (default: 4)
        min_beats: Smallest accepted beat count (default: 2)
        max_beats: Largest accepted beat count (default: 16)
        tempo: Tempo estimation settings
        low_band: Kick band filter
        mid_band: Snare band filter
        high_band: Hi-hat band filter
        thresholds: Classification thresholds
        parallel_bands: Filter the three bands on a thread pool (default: True)
    """

    max_duration: float = MAX_DURATION
    steps_per_beat: int = STEPS_PER_BEAT
    beats_per_bar: int = BEATS_PER_BAR
    min_beats: int = MIN_BEATS
    max_beats: int = MAX_BEATS
    tempo: TempoConfig = field(default_factory=TempoConfig)
    low_band: BandFilterConfig = field(
        default_factory=lambda: BandFilterConfig("lowpass", LOW_CUTOFF)
    )
    mid_band: BandFilterConfig = field(
        default_factory=lambda: BandFilterConfig("bandpass", MID_CENTER)
    )
    high_band: BandFilterConfig = field(
        default_factory=lambda: BandFilterConfig("highpass", HIGH_CUTOFF)
    )
    thresholds: ClassifierThresholds = field(default_factory=ClassifierThresholds)
    parallel_bands: bool = True
