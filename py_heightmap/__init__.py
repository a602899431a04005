"""
Procedural terrain heightmap generator built on layered simplex noise.
"""

from .core import (
    ColorBand,
    GenerationResult,
    HeightClassifier,
    HeightRange,
    Octave,
    OctaveCompositor,
    OpenSimplexField,
    RasterAssembler,
    classify,
    generate,
)
from .export import export_heights, export_image

__version__ = "0.1.0"

__all__ = [
    "ColorBand",
    "GenerationResult",
    "HeightClassifier",
    "HeightRange",
    "Octave",
    "OctaveCompositor",
    "OpenSimplexField",
    "RasterAssembler",
    "classify",
    "generate",
    "export_image",
    "export_heights",
]
