"""Analysis layer - Low-level signal analysis.

This layer extracts features from raw audio:
- Tempo (onset energy peaks)
- Band-limited per-step energy (kick, snare, hi-hat ranges)
"""

from .tempo import TempoAnalyzer
from .bands import BandEnergyExtractor
from .filters import biquad_coefficients, apply_biquad

__all__ = [
    "TempoAnalyzer",
    "BandEnergyExtractor",
    "biquad_coefficients",
    "apply_biquad",
]
