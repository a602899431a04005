"""
Core heightmap generation functionality.
"""

from .noise_field import NoiseField, OpenSimplexField
from .octaves import (
    HeightRange,
    Octave,
    OctaveCompositor,
    OctaveSpec,
    make_octave_spec,
    validate_grid,
)
from .classifier import BAND_RULES, BandRule, ColorBand, HeightClassifier, classify
from .raster import GenerationResult, RasterAssembler, generate

__all__ = ['NoiseField', 'OpenSimplexField',
           'HeightRange', 'Octave', 'OctaveCompositor', 'OctaveSpec', 'make_octave_spec', 'validate_grid',
           'BAND_RULES', 'BandRule', 'ColorBand', 'HeightClassifier', 'classify',
           'GenerationResult', 'RasterAssembler', 'generate']
