"""Tempo estimation from onset intervals."""

import logging
from typing import Optional

import numpy as np
import librosa

from ..core import SampleBuffer, TempoConfig

logger = logging.getLogger(__name__)


class TempoAnalyzer:
    """Estimate loop tempo from peaks in an RMS energy curve."""

    def __init__(self, config: Optional[TempoConfig] = None):
        self.config = config or TempoConfig()

    def estimate(self, buffer: SampleBuffer) -> float:
        """
        Estimate tempo in BPM.

        Picks energy peaks, takes the median inter-onset interval and folds
        the result into the configured tempo range. Falls back to the
        default tempo when there are too few peaks or usable intervals.

        Args:
            buffer: Decoded mono audio

        Returns:
            Tempo in BPM
        """
        energies = self.energy_curve(buffer.samples)
        peaks = self.pick_peaks(energies, buffer.sample_rate)

        if len(peaks) < self.config.min_peaks:
            logger.debug(
                "Only %d onset peaks found; using default tempo %.1f BPM",
                len(peaks), self.config.default_tempo,
            )
            return self.config.default_tempo

        intervals = np.diff(peaks)
        intervals = intervals[
            (intervals > self.config.min_interval) & (intervals < self.config.max_interval)
        ]

        if len(intervals) == 0:
            logger.debug("No usable onset intervals; using default tempo")
            return self.config.default_tempo

        # Upper median, robust to stray onsets
        median_interval = float(np.sort(intervals)[len(intervals) // 2])
        bpm = self.fold_tempo(60.0 / median_interval)

        logger.debug(
            "Tempo %.1f BPM from %d peaks (median interval %.3fs)",
            bpm, len(peaks), median_interval,
        )
        return bpm

    def energy_curve(self, samples: np.ndarray) -> np.ndarray:
        """
        RMS energy per frame.

        Frames start every hop_length samples while a full window still fits
        strictly inside the signal.
        """
        frame_length = self.config.frame_length
        # Dropping the last sample excludes a frame that ends exactly at the end
        usable = samples[:-1]
        if len(usable) < frame_length:
            return np.zeros(0, dtype=np.float32)

        rms = librosa.feature.rms(
            y=np.ascontiguousarray(usable),
            frame_length=frame_length,
            hop_length=self.config.hop_length,
            center=False,
        )
        return rms[0]

    def pick_peaks(self, energies: np.ndarray, sample_rate: int) -> np.ndarray:
        """
        Find onset times in seconds.

        A frame is a peak if it exceeds peak_threshold * max(energies) and is
        strictly greater than the two frames on each side.
        """
        if len(energies) < 5:
            return np.zeros(0)

        threshold = float(energies.max()) * self.config.peak_threshold
        center = energies[2:-2]
        is_peak = (
            (center > threshold)
            & (center > energies[1:-3])
            & (center > energies[:-4])
            & (center > energies[3:-1])
            & (center > energies[4:])
        )
        indices = np.flatnonzero(is_peak) + 2
        return indices * self.config.hop_length / sample_rate

    def fold_tempo(self, bpm: float) -> float:
        """Double or halve a tempo until it falls inside tempo_range."""
        if bpm <= 0:
            raise ValueError(f"Tempo must be positive, got {bpm}")

        low, high = self.config.tempo_range
        while bpm < low:
            bpm *= 2
        while bpm > high:
            bpm /= 2
        return bpm
