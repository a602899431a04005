"""
Octave composition.

Combines several evaluations of a NoiseField, each at its own frequency and
weight, into one height value per grid cell. The height is the weighted
average of the octave samples:

    height = sum(weight_i * noise(freq_i * x / width, freq_i * y / height))
             / sum(weight_i)

Octaves are always accumulated in the order given so results are
reproducible bit for bit.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import InvalidGridError, InvalidOctaveSpecError
from .noise_field import NoiseField


@dataclass(frozen=True)
class Octave:
    """One noise layer: a frequency multiplier and its weight."""

    frequency: float
    weight: float

    def __post_init__(self):
        if not math.isfinite(self.frequency):
            raise InvalidOctaveSpecError(f"Octave frequency must be finite, got {self.frequency}")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise InvalidOctaveSpecError(f"Octave weight must be a positive number, got {self.weight}")


OctaveSpec = Tuple[Octave, ...]

OctaveLike = Union[Octave, Sequence[float]]


def make_octave_spec(octaves: Iterable[OctaveLike]) -> OctaveSpec:
    """
    Build an immutable OctaveSpec.

    Accepts Octave instances or (frequency, weight) pairs.
    """
    spec = []
    for item in octaves:
        if isinstance(item, Octave):
            spec.append(item)
            continue
        try:
            frequency, weight = item
        except (TypeError, ValueError) as e:
            raise InvalidOctaveSpecError(
                f"Expected a (frequency, weight) pair, got {item!r}"
            ) from e
        spec.append(Octave(float(frequency), float(weight)))

    if not spec:
        raise InvalidOctaveSpecError("At least one octave is required")
    return tuple(spec)


def validate_grid(width: int, height: int) -> None:
    """Raise InvalidGridError unless both dimensions are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise InvalidGridError(f"Grid {name} must be a positive integer, got {value!r}")


@dataclass
class HeightRange:
    """Observed minimum and maximum heights (diagnostic only)."""

    minimum: float = math.inf
    maximum: float = -math.inf

    def update(self, value: float) -> None:
        if value < self.minimum:
            self.minimum = value
        if value > self.maximum:
            self.maximum = value

    def update_array(self, values: np.ndarray) -> None:
        if values.size:
            self.update(float(np.min(values)))
            self.update(float(np.max(values)))

    @property
    def empty(self) -> bool:
        return self.minimum > self.maximum


class OctaveCompositor:
    """
    Composes the octaves of one NoiseField over a fixed width x height grid.
    """

    def __init__(
        self,
        noise: NoiseField,
        octaves: Iterable[OctaveLike],
        width: int,
        height: int,
        tracker: Optional[HeightRange] = None,
    ):
        """
        Args:
            noise: Noise source sampled by every octave
            octaves: Ordered octave list
            width: Grid width in cells
            height: Grid height in cells
            tracker: Optional HeightRange updated with every composed value
        """
        validate_grid(width, height)
        self.noise = noise
        self.octaves = make_octave_spec(octaves)
        self.width = int(width)
        self.height = int(height)
        self.tracker = tracker

        self.total_weight = 0.0
        for octave in self.octaves:
            self.total_weight += octave.weight

    def compose(self, x: int, y: int) -> float:
        """Weighted average of all octave samples for cell (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")

        x_norm = x / self.width
        y_norm = y / self.height

        total = 0.0
        for octave in self.octaves:
            value = self.noise.eval(octave.frequency * x_norm, octave.frequency * y_norm)
            total += octave.weight * value
        value = total / self.total_weight

        if self.tracker is not None:
            self.tracker.update(value)
        return value

    def compose_grid(self) -> np.ndarray:
        """
        Compose every cell at once.

        Element-wise identical to calling ``compose`` for each cell.

        Returns:
            float64 array of shape (height, width), indexed [y, x].
        """
        x_norm = np.arange(self.width, dtype=np.float64) / self.width
        y_norm = np.arange(self.height, dtype=np.float64) / self.height

        total = np.zeros((self.height, self.width), dtype=np.float64)
        for octave in self.octaves:
            samples = self.noise.eval_grid(octave.frequency * x_norm, octave.frequency * y_norm)
            total += octave.weight * samples
        heights = total / self.total_weight

        if self.tracker is not None:
            self.tracker.update_array(heights)
        return heights
