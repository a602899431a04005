"""
Raster assembly: noise -> octave composition -> classification -> pixels.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np
import structlog

from .classifier import HeightClassifier
from .noise_field import NoiseField, OpenSimplexField
from .octaves import (
    HeightRange,
    OctaveCompositor,
    OctaveLike,
    OctaveSpec,
    make_octave_spec,
    validate_grid,
)

logger = structlog.get_logger()


@dataclass
class GenerationResult:
    """Output of one generation pass."""

    pixels: np.ndarray  # uint8, (height, width, 4), RGBA
    heights: np.ndarray  # float64, (height, width)
    height_range: HeightRange
    seed: int
    octaves: OctaveSpec

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]


class RasterAssembler:
    """
    Fills a pixel buffer by composing and classifying every grid cell.

    The result is a pure function of (width, height, octaves, seed) for a
    given noise factory.
    """

    def __init__(
        self,
        noise_factory: Callable[[int], NoiseField] = OpenSimplexField,
        classifier: Optional[HeightClassifier] = None,
    ):
        self.noise_factory = noise_factory
        self.classifier = classifier or HeightClassifier()

    def generate(
        self,
        width: int,
        height: int,
        octaves: Iterable[OctaveLike],
        seed: int,
        vectorized: bool = True,
        observer: Optional[Callable[[HeightRange], None]] = None,
    ) -> GenerationResult:
        """
        Generate a classified RGBA raster.

        Args:
            width: Grid width in pixels
            height: Grid height in pixels
            octaves: Ordered (frequency, weight) list
            seed: Seed for the noise source
            vectorized: Compute the grid with NumPy instead of cell by cell
            observer: Called once with the observed height range

        Returns:
            GenerationResult with the pixel buffer and diagnostics
        """
        validate_grid(width, height)
        spec = make_octave_spec(octaves)

        tracker = HeightRange()
        noise = self.noise_factory(seed)
        compositor = OctaveCompositor(noise, spec, width, height, tracker=tracker)

        logger.info(
            "Generating heightmap",
            width=width,
            height=height,
            seed=seed,
            octaves=len(compositor.octaves),
            vectorized=vectorized,
        )

        if vectorized:
            heights = compositor.compose_grid()
            pixels = self.classifier.classify_grid(heights)
        else:
            heights, pixels = self._generate_cells(compositor)

        logger.info(
            "Heightmap generated",
            min_height=tracker.minimum,
            max_height=tracker.maximum,
        )

        if observer is not None:
            observer(tracker)

        return GenerationResult(
            pixels=pixels,
            heights=heights,
            height_range=tracker,
            seed=seed,
            octaves=compositor.octaves,
        )

    def _generate_cells(self, compositor: OctaveCompositor):
        """Row-major walk over every cell."""
        heights = np.zeros((compositor.height, compositor.width), dtype=np.float64)
        pixels = np.zeros((compositor.height, compositor.width, 4), dtype=np.uint8)

        for y in range(compositor.height):
            for x in range(compositor.width):
                value = compositor.compose(x, y)
                heights[y, x] = value
                pixels[y, x] = self.classifier.classify(value)

        return heights, pixels


def generate(
    width: int,
    height: int,
    octaves: Iterable[OctaveLike],
    seed: int,
    noise_factory: Callable[[int], NoiseField] = OpenSimplexField,
    vectorized: bool = True,
    observer: Optional[Callable[[HeightRange], None]] = None,
) -> GenerationResult:
    """Convenience wrapper around RasterAssembler.generate."""
    assembler = RasterAssembler(noise_factory=noise_factory)
    return assembler.generate(
        width, height, octaves, seed, vectorized=vectorized, observer=observer
    )
