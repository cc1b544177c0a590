"""Step grid - Snap a loop to a fixed rhythmic resolution."""

from typing import Optional

from ..core import AnalysisConfig, StepGrid, BeatCountError, round_half_up


class StepGridBuilder:
    """Turn loop duration and tempo into a validated step grid."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize StepGridBuilder.

        Args:
            config: Supplies steps_per_beat, beats_per_bar and the accepted
                beat count range
        """
        self.config = config or AnalysisConfig()

    def beat_count(self, duration: float, bpm: float) -> int:
        """Number of beats the loop spans at the given tempo."""
        return round_half_up(duration / 60.0 * bpm)

    def build(self, duration: float, bpm: float) -> StepGrid:
        """
        Build the step grid.

        Args:
            duration: Loop duration in seconds
            bpm: Tempo in BPM

        Returns:
            StepGrid with beat_count * steps_per_beat steps

        Raises:
            BeatCountError: If the beat count is outside [min_beats, max_beats]
        """
        beats = self.beat_count(duration, bpm)
        if beats < self.config.min_beats or beats > self.config.max_beats:
            raise BeatCountError(beats, self.config.min_beats, self.config.max_beats)

        return StepGrid(
            beat_count=beats,
            steps_per_beat=self.config.steps_per_beat,
            beats_per_bar=self.config.beats_per_bar,
        )
