"""MIDI export functionality."""

import pretty_midi
from pathlib import Path

from ..core import DrumHits, StepGrid


class DrumMIDIExporter:
    """Export drum hits to a General MIDI percussion track."""

    def __init__(
        self,
        tempo: float = 120.0,
        velocity: int = 100,
        instrument_name: str = "Drums",
    ):
        """
        Initialize DrumMIDIExporter.

        Args:
            tempo: Tempo in BPM
            velocity: Velocity for every hit (0-127)
            instrument_name: MIDI track name
        """
        self.tempo = tempo
        self.velocity = velocity
        self.instrument_name = instrument_name

    def export(self, hits: DrumHits, grid: StepGrid, output_path: str) -> None:
        """
        Export hits to MIDI file.

        Args:
            hits: Kick, snare and hi-hat sequences
            grid: Step grid the hits were quantized to
            output_path: Path to output MIDI file
        """
        midi = self.hits_to_pretty_midi(hits, grid)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))

    def hits_to_pretty_midi(self, hits: DrumHits, grid: StepGrid) -> pretty_midi.PrettyMIDI:
        """Convert hits to PrettyMIDI object without saving."""
        midi = pretty_midi.PrettyMIDI(initial_tempo=self.tempo)

        instrument = pretty_midi.Instrument(
            program=0,
            is_drum=True,
            name=self.instrument_name,
        )

        step_duration = grid.step_duration(self.tempo)
        for sequence in hits:
            for step in sequence.steps:
                start = step * step_duration
                instrument.notes.append(
                    pretty_midi.Note(
                        velocity=self.velocity,
                        pitch=sequence.instrument.midi_note,
                        start=start,
                        end=start + step_duration,
                    )
                )

        instrument.notes.sort(key=lambda n: (n.start, n.pitch))
        midi.instruments.append(instrument)
        return midi
