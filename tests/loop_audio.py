"""Synthetic drum audio for tests."""

import io

import numpy as np
import soundfile as sf
from scipy.signal.windows import tukey

SR = 22050

KICK_FREQ = 60.0
SNARE_FREQ = 400.0
HIHAT_FREQ = 8000.0


def sine_burst(freq: float, length: int, sr: int = SR, amplitude: float = 1.0) -> np.ndarray:
    """Sine burst with tapered edges so it adds no broadband clicks."""
    t = np.arange(length) / sr
    return (amplitude * np.sin(2 * np.pi * freq * t) * tukey(length, 0.25)).astype(np.float32)


def decaying_burst(
    freq: float,
    length: int,
    sr: int = SR,
    decay: float = 0.05,
    amplitude: float = 1.0,
) -> np.ndarray:
    """Percussive hit: sine with exponential decay."""
    t = np.arange(length) / sr
    return (amplitude * np.sin(2 * np.pi * freq * t) * np.exp(-t / decay)).astype(np.float32)


def click_track(
    bpm: float,
    n_beats: int,
    sr: int = SR,
    offset: float = 0.25,
    freq: float = 200.0,
) -> np.ndarray:
    """Decaying hits every beat, starting at offset seconds."""
    interval = 60.0 / bpm
    total = int((offset + n_beats * interval) * sr)
    audio = np.zeros(total, dtype=np.float32)
    hit_length = int(interval * sr)
    for beat in range(n_beats):
        start = int(round((offset + beat * interval) * sr))
        hit = decaying_burst(freq, min(hit_length, total - start), sr)
        audio[start:start + len(hit)] += hit
    return audio


def planted_loop(
    n_samples: int,
    step_count: int,
    kicks=(),
    snares=(),
    hihats=(),
    sr: int = SR,
) -> np.ndarray:
    """
    Place one full-step burst per planted hit.

    Steps are n_samples // step_count wide, the same slicing the band
    extractor uses, so every burst lands inside exactly one step.
    """
    audio = np.zeros(n_samples, dtype=np.float32)
    step_size = n_samples // step_count
    voices = [
        (kicks, KICK_FREQ, 0.9),
        (snares, SNARE_FREQ, 0.6),
        (hihats, HIHAT_FREQ, 0.3),
    ]
    for steps, freq, amplitude in voices:
        burst = sine_burst(freq, step_size, sr, amplitude)
        for step in steps:
            start = step * step_size
            audio[start:start + step_size] += burst
    return audio


def to_wav_bytes(audio: np.ndarray, sr: int = SR) -> bytes:
    """Encode samples as 32-bit float WAV."""
    buf = io.BytesIO()
    sf.write(buf, audio, sr, format="WAV", subtype="FLOAT")
    return buf.getvalue()
