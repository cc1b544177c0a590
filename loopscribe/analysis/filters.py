"""Biquad IIR filters for band isolation.

Coefficients follow the Audio EQ Cookbook as used by the Web Audio
BiquadFilterNode: for lowpass/highpass, Q is a resonance in dB; for
bandpass, Q is the usual quality factor.
"""

from typing import Tuple

import numpy as np
from scipy import signal

FILTER_KINDS = ("lowpass", "highpass", "bandpass")


def biquad_coefficients(
    kind: str,
    frequency: float,
    sample_rate: int,
    q: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute normalized (b, a) coefficients for a second-order section.

    Args:
        kind: One of "lowpass", "highpass", "bandpass"
        frequency: Cutoff (or center) frequency in Hz
        sample_rate: Sample rate in Hz
        q: Resonance in dB (lowpass/highpass) or quality factor (bandpass)

    Returns:
        Tuple of (b, a) arrays of length 3, with a[0] == 1
    """
    if kind not in FILTER_KINDS:
        raise ValueError(f"Unknown filter kind: {kind}. Valid: {FILTER_KINDS}")

    # Keep the cutoff below Nyquist
    frequency = min(frequency, sample_rate / 2 - 1)
    w0 = 2 * np.pi * frequency / sample_rate
    cos_w0 = np.cos(w0)
    sin_w0 = np.sin(w0)

    if kind == "bandpass":
        alpha = sin_w0 / (2 * q)
        b = np.array([alpha, 0.0, -alpha])
    else:
        alpha = sin_w0 / (2 * 10 ** (q / 20))
        if kind == "lowpass":
            b = np.array([(1 - cos_w0) / 2, 1 - cos_w0, (1 - cos_w0) / 2])
        else:
            b = np.array([(1 + cos_w0) / 2, -(1 + cos_w0), (1 + cos_w0) / 2])

    a = np.array([1 + alpha, -2 * cos_w0, 1 - alpha])
    return b / a[0], a / a[0]


def apply_biquad(
    samples: np.ndarray,
    kind: str,
    frequency: float,
    sample_rate: int,
    q: float = 1.0,
) -> np.ndarray:
    """Filter samples, returning a new float64 array."""
    b, a = biquad_coefficients(kind, frequency, sample_rate, q)
    return signal.lfilter(b, a, np.asarray(samples, dtype=np.float64))

