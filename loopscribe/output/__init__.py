"""Output layer - Export to various formats.

This layer renders detected drum patterns as:
- Stacked mini-notation text
- General MIDI drum files
"""

from .notation import PatternSerializer
from .midi import DrumMIDIExporter

__all__ = [
    "PatternSerializer",
    "DrumMIDIExporter",
]
