"""
Configuration for heightmap generation.
"""

from .config import Settings
from .octave_presets import PRESETS, get_preset, list_presets

__all__ = ['Settings', 'PRESETS', 'get_preset', 'list_presets']
