"""Per-step band energy extraction."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from ..core import (
    AnalysisConfig,
    BandFilterConfig,
    Band,
    BandEnergies,
    EnergyProfile,
    SampleBuffer,
)
from .filters import apply_biquad

logger = logging.getLogger(__name__)


class BandEnergyExtractor:
    """Split audio into kick/snare/hi-hat bands and measure each grid step."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize BandEnergyExtractor.

        Args:
            config: Analysis configuration; supplies the three band filters
                and whether to run them on a thread pool
        """
        self.config = config or AnalysisConfig()

    @property
    def filters(self):
        return {
            Band.LOW: self.config.low_band,
            Band.MID: self.config.mid_band,
            Band.HIGH: self.config.high_band,
        }

    def extract(self, buffer: SampleBuffer, step_count: int) -> BandEnergies:
        """
        Compute the low, mid and high energy profiles.

        Each band is filtered and measured independently; with parallel_bands
        the three passes run concurrently and are joined before returning.

        Args:
            buffer: Decoded mono audio
            step_count: Number of grid steps

        Returns:
            BandEnergies with one EnergyProfile per band
        """
        if step_count <= 0:
            raise ValueError(f"step_count must be positive, got {step_count}")

        filters = self.filters
        if self.config.parallel_bands:
            with ThreadPoolExecutor(max_workers=len(filters)) as pool:
                futures = {
                    band: pool.submit(self.band_profile, buffer, band, band_filter, step_count)
                    for band, band_filter in filters.items()
                }
                profiles = {band: future.result() for band, future in futures.items()}
        else:
            profiles = {
                band: self.band_profile(buffer, band, band_filter, step_count)
                for band, band_filter in filters.items()
            }

        return BandEnergies(
            low=profiles[Band.LOW],
            mid=profiles[Band.MID],
            high=profiles[Band.HIGH],
        )

    def band_profile(
        self,
        buffer: SampleBuffer,
        band: Band,
        band_filter: BandFilterConfig,
        step_count: int,
    ) -> EnergyProfile:
        """Filter a copy of the buffer and measure it per step."""
        filtered = apply_biquad(
            buffer.samples, band_filter.kind, band_filter.frequency, buffer.sample_rate, band_filter.q
        )
        logger.debug("Filtered %s band (%s @ %.0f Hz)", band.value, band_filter.kind, band_filter.frequency)
        return self.step_energy(filtered, step_count, band)

    @staticmethod
    def step_energy(filtered: np.ndarray, step_count: int, band: Band) -> EnergyProfile:
        """
        Normalized RMS and peak for each of step_count equal slices.

        Slices are floor(len / step_count) samples wide; trailing samples
        only count towards the normalization peak.
        """
        filtered = np.asarray(filtered, dtype=np.float64)
        global_peak = float(np.abs(filtered).max()) if filtered.size else 0.0
        norm = global_peak or 1.0

        step_size = len(filtered) // step_count
        if step_size == 0:
            zeros = np.zeros(step_count)
            return EnergyProfile(band=band, rms=zeros, peak=zeros.copy())

        slices = np.abs(filtered[: step_size * step_count]).reshape(step_count, step_size)
        rms = np.sqrt(np.mean(slices ** 2, axis=1))
        peak = slices.max(axis=1)

        return EnergyProfile(band=band, rms=rms / norm, peak=peak / norm)
