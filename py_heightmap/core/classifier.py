"""
Height to colour classification.

Heights are classified by an ordered list of band rules; the first rule
whose predicate matches decides the colour:

    1. WATER    height <  0.25         blue ramp, B = (height * 4) * 255
    2. BEACH    0.25 <= height <= 0.30 sand (242, 209, 107) fading to black
    3. SNOW     height >  0.75         grey, height * 255
    4. DEFAULT  anything else          grey, height * 255

Channels are truncated toward zero and clamped to [0, 255], so heights
outside [0, 1) saturate instead of wrapping around.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple

import numpy as np

RGBA = Tuple[int, int, int, int]

OPAQUE = 255

SAND = (242, 209, 107)

WATER_LIMIT = 0.25
BEACH_LIMIT = 0.30
SNOW_LIMIT = 0.75


class ColorBand(Enum):
    """Height bands in decision order."""

    WATER = "water"
    BEACH = "beach"
    SNOW = "snow"
    DEFAULT = "default"


def to_channel(value):
    """Truncate toward zero and clamp to the 8-bit range."""
    return np.clip(np.trunc(value), 0, 255)


def _water(height):
    height = height * 4
    zero = np.zeros_like(height)
    return zero, zero, height * 255


def _beach(height):
    factor = 1 - (height - WATER_LIMIT) * 20
    return SAND[0] * factor, SAND[1] * factor, SAND[2] * factor


def _grey(height):
    value = height * 255
    return value, value, value


@dataclass(frozen=True)
class BandRule:
    """A predicate/formula pair. Both work on floats and NumPy arrays."""

    band: ColorBand
    matches: Callable
    color: Callable


BAND_RULES: Tuple[BandRule, ...] = (
    BandRule(ColorBand.WATER, lambda h: h < WATER_LIMIT, _water),
    BandRule(ColorBand.BEACH, lambda h: (h >= WATER_LIMIT) & (h <= BEACH_LIMIT), _beach),
    BandRule(ColorBand.SNOW, lambda h: h > SNOW_LIMIT, _grey),
    BandRule(ColorBand.DEFAULT, lambda h: np.ones_like(h, dtype=bool), _grey),
)


class HeightClassifier:
    """Maps heights to RGBA colours using an ordered list of band rules."""

    def __init__(self, rules: Tuple[BandRule, ...] = BAND_RULES):
        if not rules:
            raise ValueError("At least one band rule is required")
        self.rules = tuple(rules)

    def rule_for(self, height: float) -> BandRule:
        for rule in self.rules:
            if rule.matches(height):
                return rule
        # Only reachable with a custom rule list lacking a catch-all
        raise ValueError(f"No band matches height {height}")

    def band_for(self, height: float) -> ColorBand:
        return self.rule_for(height).band

    def classify(self, height: float) -> RGBA:
        """Colour for a single height."""
        rule = self.rule_for(height)
        r, g, b = rule.color(np.float64(height))
        return int(to_channel(r)), int(to_channel(g)), int(to_channel(b)), OPAQUE

    def classify_grid(self, heights: np.ndarray) -> np.ndarray:
        """
        Colour a whole height array.

        Uses the same decision order as ``classify``: ``np.select`` picks the
        first matching condition for every element.

        Returns:
            uint8 array with shape heights.shape + (4,).
        """
        heights = np.asarray(heights, dtype=np.float64)
        conditions = [np.asarray(rule.matches(heights), dtype=bool) for rule in self.rules]
        colors = [rule.color(heights) for rule in self.rules]

        out = np.empty(heights.shape + (4,), dtype=np.uint8)
        for channel in range(3):
            choices = [np.broadcast_to(color[channel], heights.shape) for color in colors]
            selected = np.select(conditions, choices, default=0.0)
            out[..., channel] = to_channel(selected).astype(np.uint8)
        out[..., 3] = OPAQUE
        return out


def classify(height: float) -> RGBA:
    """Classify a height with the default band rules."""
    return _default_classifier.classify(height)


_default_classifier = HeightClassifier()
