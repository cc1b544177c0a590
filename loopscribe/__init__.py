"""loopscribe - Drum loop to pattern notation.

Architecture Layers:
    1. input/      - Audio decoding
    2. analysis/   - Signal analysis (tempo, band energy)
    3. processing/ - Step grid and hit classification
    4. output/     - Export (mini-notation, MIDI)
"""

__version__ = "0.1.0"

# Core types
from .core import (
    SampleBuffer,
    StepGrid,
    EnergyProfile,
    HitSequence,
    DrumHits,
    DrumPattern,
    AnalysisResult,
    AnalysisConfig,
    LoopAnalysisError,
    DecodeError,
    DurationError,
    BeatCountError,
)

# Input layer
from .input import AudioDecoder

# Analysis layer
from .analysis import TempoAnalyzer, BandEnergyExtractor

# Processing layer
from .processing import StepGridBuilder, HitClassifier

# Output layer
from .output import PatternSerializer, DrumMIDIExporter

# Pipeline
from .pipeline import LoopAnalyzer, analyze_drum_loop

__all__ = [
    # Core
    "SampleBuffer",
    "StepGrid",
    "EnergyProfile",
    "HitSequence",
    "DrumHits",
    "DrumPattern",
    "AnalysisResult",
    "AnalysisConfig",
    "LoopAnalysisError",
    "DecodeError",
    "DurationError",
    "BeatCountError",
    # Input
    "AudioDecoder",
    # Analysis
    "TempoAnalyzer",
    "BandEnergyExtractor",
    # Processing
    "StepGridBuilder",
    "HitClassifier",
    # Output
    "PatternSerializer",
    "DrumMIDIExporter",
    # Pipeline
    "LoopAnalyzer",
    "analyze_drum_loop",
]
