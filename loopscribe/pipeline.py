"""End-to-end drum loop analysis.

Stages run strictly in order, and each validation happens before the next
expensive stage:

    open -> duration check -> decode -> tempo -> step grid (beat check)
           -> band energies (3 parallel filters) -> classify -> serialize
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .core import (
    AnalysisConfig,
    AnalysisResult,
    DrumPattern,
    DurationError,
    SampleBuffer,
    round_half_up,
)
from .input import AudioDecoder
from .analysis import TempoAnalyzer, BandEnergyExtractor
from .processing import StepGridBuilder, HitClassifier
from .output import PatternSerializer

logger = logging.getLogger(__name__)


class LoopAnalyzer:
    """Convert a short drum loop into a quantized pattern and notation."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        decoder: Optional[AudioDecoder] = None,
    ):
        self.config = config or AnalysisConfig()
        self.decoder = decoder or AudioDecoder()
        self.tempo_analyzer = TempoAnalyzer(self.config.tempo)
        self.grid_builder = StepGridBuilder(self.config)
        self.band_extractor = BandEnergyExtractor(self.config)
        self.classifier = HitClassifier(self.config.thresholds)
        self.serializer = PatternSerializer(
            steps_per_beat=self.config.steps_per_beat,
            beats_per_bar=self.config.beats_per_bar,
        )

    def analyze_bytes(self, data: bytes, tempo: Optional[float] = None) -> AnalysisResult:
        """
        Analyze encoded audio.

        The decoding session stays open for the whole analysis and is closed
        on every exit path. Over-long files are rejected from the header
        before any frames are decoded.

        Args:
            data: Encoded audio bytes
            tempo: Tempo override in BPM; estimated when None

        Raises:
            DecodeError: If the audio cannot be decoded
            DurationError: If the loop is too long
            BeatCountError: If the beat count is out of range
        """
        with self.decoder.session(data) as session:
            self.check_duration(session.duration)
            buffer = session.read()
            return self.analyze_buffer(buffer, tempo=tempo)

    def analyze_file(
        self,
        path: Union[str, Path],
        tempo: Optional[float] = None,
    ) -> AnalysisResult:
        """Analyze an audio file on disk."""
        return self.analyze_bytes(self.decoder.read_file(path), tempo=tempo)

    def analyze_buffer(
        self,
        buffer: SampleBuffer,
        tempo: Optional[float] = None,
    ) -> AnalysisResult:
        """Analyze already decoded audio."""
        duration = buffer.duration
        self.check_duration(duration)

        if tempo is None:
            bpm = self.tempo_analyzer.estimate(buffer)
        elif tempo <= 0:
            raise ValueError(f"Tempo override must be positive, got {tempo}")
        else:
            bpm = float(tempo)

        grid = self.grid_builder.build(duration, bpm)
        logger.info(
            "Loop: %.2fs @ %.1f BPM -> %d beats, %d steps",
            duration, bpm, grid.beat_count, grid.step_count,
        )

        bands = self.band_extractor.extract(buffer, grid.step_count)
        hits = self.classifier.classify(bands)
        code = self.serializer.serialize(hits, bpm, grid.beat_count)

        pattern = DrumPattern(
            bpm=round_half_up(bpm),
            beats=grid.beat_count,
            bars=grid.bars,
            kicks=hits.kick.count,
            snares=hits.snare.count,
            hihats=hits.hihat.count,
            duration=f"{duration:.2f}",
        )

        return AnalysisResult(
            pattern=pattern,
            code=code,
            hits=hits,
            grid=grid,
            tempo=bpm,
            sample_rate=buffer.sample_rate,
        )

    def check_duration(self, duration: float) -> None:
        """Raise DurationError if the loop is longer than max_duration."""
        if duration > self.config.max_duration:
            raise DurationError(duration, self.config.max_duration)


def analyze_drum_loop(data: bytes, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Analyze encoded drum loop audio with default components."""
    return LoopAnalyzer(config).analyze_bytes(data)
