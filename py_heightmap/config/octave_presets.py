"""
Named octave presets.

Each preset is an ordered list of (frequency, weight) pairs. Frequencies are
in cycles across the whole grid, since cell coordinates are normalized to
[0, 1) before sampling.
"""

from typing import Dict, List

from ..core.octaves import OctaveSpec, make_octave_spec
from ..errors import UnknownPresetError

PRESETS: Dict[str, OctaveSpec] = {
    # Three layers: fine detail dominates, broad shapes add variation
    "reference": make_octave_spec([(12.5, 1.0), (5.6, 0.5), (2.5, 0.25)]),
    # Large landmasses with softer coasts
    "continents": make_octave_spec([(2.0, 1.0), (4.0, 0.5), (8.0, 0.25), (16.0, 0.125)]),
    # Many small islands
    "archipelago": make_octave_spec([(18.0, 1.0), (36.0, 0.35)]),
    "single": make_octave_spec([(5.0, 1.0)]),
}


def get_preset(name: str) -> OctaveSpec:
    """Return the octave spec registered under ``name``."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown octave preset '{name}'. Available: {', '.join(list_presets())}"
        ) from None


def list_presets() -> List[str]:
    return sorted(PRESETS)
