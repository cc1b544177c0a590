"""Hit classification from band energy profiles.

Each instrument has its own rule over the three aligned profiles. Rules
are evaluated independently, so one step may register several instruments.
"""

from typing import Optional

import numpy as np

from ..core import (
    BandEnergies,
    ClassifierThresholds,
    DrumHits,
    HitSequence,
    Instrument,
)


class HitClassifier:
    """Threshold-based kick/snare/hi-hat detector."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def classify(self, bands: BandEnergies) -> DrumHits:
        """
        Classify every step of the grid.

        Args:
            bands: Low, mid and high profiles of equal length

        Returns:
            DrumHits with one HitSequence per instrument

        Raises:
            ValueError: If the profiles differ in length
        """
        lengths = {len(bands.low), len(bands.mid), len(bands.high)}
        if len(lengths) != 1:
            raise ValueError(f"Energy profiles differ in length: {sorted(lengths)}")

        return DrumHits(
            kick=HitSequence(Instrument.KICK, tuple(self.kicks(bands))),
            snare=HitSequence(Instrument.SNARE, tuple(self.snares(bands))),
            hihat=HitSequence(Instrument.HIHAT, tuple(self.hihats(bands))),
        )

    def kicks(self, bands: BandEnergies) -> np.ndarray:
        """Strong low end, clearly above the highs."""
        t = self.thresholds
        low, high = bands.low, bands.high
        return (
            (low.rms > t.kick_rms)
            & (low.peak > t.kick_peak)
            & (low.rms > high.rms * t.kick_high_ratio)
        )

    def snares(self, bands: BandEnergies) -> np.ndarray:
        """Mid-range punch without much low end (to avoid kicks)."""
        t = self.thresholds
        low, mid = bands.low, bands.mid
        return (
            (mid.rms > t.snare_rms)
            & (mid.peak > t.snare_peak)
            & (low.rms < t.snare_max_low_rms)
        )

    def hihats(self, bands: BandEnergies) -> np.ndarray:
        """Pure high-frequency energy."""
        t = self.thresholds
        low, mid, high = bands.low, bands.mid, bands.high
        return (
            (high.rms > t.hihat_rms)
            & (high.peak > t.hihat_peak)
            & (low.rms < t.hihat_max_low_rms)
            & (mid.rms < t.hihat_max_mid_rms)
        )
