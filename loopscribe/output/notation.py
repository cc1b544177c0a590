"""Mini-notation output for drum patterns.

Produces a stacked pattern with one block per instrument, one line per bar:

    // 4 beat drum loop @ 120 BPM
    // 32nd note quantization

    stack(
      s(`
        bd ~ ~ ~ ~ ~ ~ ~  ~ ~ ~ ~ ~ ~ ~ ~  bd ~ ~ ~ ~ ~ ~ ~  ~ ~ ~ ~ ~ ~ ~ ~
      `),
      ...
    ).slow(4).cpm(120)
"""

import re
from typing import Iterable, List

from ..core import DrumHits, STEPS_PER_BEAT, BEATS_PER_BAR, round_half_up
from ..core.constants import REST_TOKEN

QUANTIZATION_NAMES = {
    1: "quarter",
    2: "8th",
    4: "16th",
    8: "32nd",
    16: "64th",
}

_TRACK_RE = re.compile(r"s\(`(.*?)`\)", re.DOTALL)


class PatternSerializer:
    """Render drum hits as stacked mini-notation."""

    def __init__(
        self,
        steps_per_beat: int = STEPS_PER_BEAT,
        beats_per_bar: int = BEATS_PER_BAR,
    ):
        if steps_per_beat not in QUANTIZATION_NAMES:
            raise ValueError(
                f"Unsupported steps_per_beat: {steps_per_beat}. "
                f"Valid: {sorted(QUANTIZATION_NAMES)}"
            )
        self.steps_per_beat = steps_per_beat
        self.beats_per_bar = beats_per_bar

    @property
    def quantization_name(self) -> str:
        return QUANTIZATION_NAMES[self.steps_per_beat]

    def beat_strings(self, hits: Iterable[bool], token: str) -> List[str]:
        """Group steps into beats of space-joined tokens."""
        tokens = [token if hit else REST_TOKEN for hit in hits]
        return [
            " ".join(tokens[i:i + self.steps_per_beat])
            for i in range(0, len(tokens), self.steps_per_beat)
        ]

    def track(self, beats: List[str]) -> str:
        """One s(`...`) block, one bar per line."""
        lines = ["  s(`"]
        for i in range(0, len(beats), self.beats_per_bar):
            lines.append("    " + "  ".join(beats[i:i + self.beats_per_bar]))
        lines.append("  `)")
        return "\n".join(lines)

    def serialize(self, hits: DrumHits, bpm: float, beats: int) -> str:
        """
        Generate notation for a full pattern.

        Args:
            hits: Kick, snare and hi-hat sequences
            bpm: Tempo in BPM (rounded for display)
            beats: Number of beats in the loop

        Returns:
            Notation text
        """
        tempo = round_half_up(bpm)
        tracks = [
            self.track(self.beat_strings(sequence, sequence.instrument.token))
            for sequence in hits
        ]

        return (
            f"// {beats} beat drum loop @ {tempo} BPM\n"
            f"// {self.quantization_name} note quantization\n\n"
            "stack(\n"
            + ",\n".join(tracks)
            + "\n"
            + f").slow({beats}).cpm({tempo})"
        )

    @staticmethod
    def parse(code: str) -> List[List[str]]:
        """Split notation back into one token list per s(`...`) block."""
        return [block.split() for block in _TRACK_RE.findall(code)]
