"""Processing layer - Quantization and classification.

This layer turns band energies into drum hits:
- Step grid (beat count, 32nd-note resolution)
- Per-instrument hit classification
"""

from .grid import StepGridBuilder
from .classify import HitClassifier

__all__ = [
    "StepGridBuilder",
    "HitClassifier",
]
