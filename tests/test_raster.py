"""Tests for raster assembly."""

import numpy as np
import pytest

from py_heightmap.core.classifier import HeightClassifier
from py_heightmap.core.noise_field import OpenSimplexField
from py_heightmap.core.octaves import HeightRange
from py_heightmap.core.raster import RasterAssembler, generate
from py_heightmap.errors import InvalidGridError, InvalidOctaveSpecError

from conftest import GradientField, RecordingField, constant_factory


class TestEndToEnd:
    """Small grids with stub noise sources."""

    def test_constant_zero_is_dark_water(self):
        result = generate(4, 4, [(1.0, 1.0)], seed=0, noise_factory=constant_factory(0.0))

        assert result.pixels.shape == (4, 4, 4)
        assert result.pixels.dtype == np.uint8
        assert np.all(result.pixels == np.array([0, 0, 0, 255], dtype=np.uint8))

    def test_constant_high_is_snow(self):
        result = generate(4, 4, [(1.0, 1.0)], seed=0, noise_factory=constant_factory(0.9))

        assert result.pixels.shape == (4, 4, 4)
        assert np.all(result.pixels == np.array([229, 229, 229, 255], dtype=np.uint8))

    @pytest.mark.parametrize("vectorized", [True, False])
    def test_both_paths_handle_constant_fields(self, vectorized):
        result = generate(
            4, 4, [(1.0, 1.0)], seed=0,
            noise_factory=constant_factory(0.9), vectorized=vectorized,
        )

        assert np.all(result.pixels == np.array([229, 229, 229, 255], dtype=np.uint8))

    def test_result_metadata(self, reference_octaves):
        result = generate(6, 3, reference_octaves, seed=11, noise_factory=GradientField)

        assert result.width == 6
        assert result.height == 3
        assert result.seed == 11
        assert [o.frequency for o in result.octaves] == [12.5, 5.6, 2.5]
        assert result.heights.shape == (3, 6)


class TestCoverage:
    """Every cell is computed exactly once."""

    def test_each_cell_sampled_once_per_octave(self):
        field = RecordingField(0.5)
        octaves = [(1.0, 1.0), (3.0, 0.5)]

        generate(5, 3, octaves, seed=0, noise_factory=lambda seed: field, vectorized=False)

        assert len(field.calls) == 5 * 3 * len(octaves)
        base_points = set(field.calls[::2])
        assert base_points == {(x / 5, y / 3) for x in range(5) for y in range(3)}

    def test_each_pixel_matches_its_cell(self, reference_octaves):
        assembler = RasterAssembler(noise_factory=GradientField)
        result = assembler.generate(9, 5, reference_octaves, seed=2)

        classifier = HeightClassifier()
        for y in range(5):
            for x in range(9):
                expected = classifier.classify(result.heights[y, x])
                assert tuple(result.pixels[y, x]) == expected


class TestDeterminism:
    """Identical inputs give identical buffers."""

    def test_same_seed_same_pixels(self, reference_octaves):
        first = generate(40, 24, reference_octaves, seed=1234)
        second = generate(40, 24, reference_octaves, seed=1234)

        assert first.pixels.tobytes() == second.pixels.tobytes()

    def test_different_seed_different_pixels(self, reference_octaves):
        first = generate(40, 24, reference_octaves, seed=1)
        second = generate(40, 24, reference_octaves, seed=2)

        assert not np.array_equal(first.heights, second.heights)

    def test_vectorized_matches_per_cell(self, reference_octaves):
        fast = generate(24, 16, reference_octaves, seed=99, vectorized=True)
        slow = generate(24, 16, reference_octaves, seed=99, vectorized=False)

        np.testing.assert_allclose(fast.heights, slow.heights, rtol=0, atol=1e-12)
        assert fast.pixels.tobytes() == slow.pixels.tobytes()

    def test_vectorized_matches_per_cell_with_stub(self, reference_octaves):
        fast = generate(17, 11, reference_octaves, seed=5, noise_factory=GradientField)
        slow = generate(17, 11, reference_octaves, seed=5, noise_factory=GradientField, vectorized=False)

        assert fast.pixels.tobytes() == slow.pixels.tobytes()


class TestDiagnostics:
    """Observed height range reporting."""

    def test_range_reported(self, reference_octaves):
        result = generate(20, 10, reference_octaves, seed=3, noise_factory=GradientField)

        assert result.height_range.minimum == result.heights.min()
        assert result.height_range.maximum == result.heights.max()

    def test_observer_called_once(self, reference_octaves):
        seen = []

        result = generate(
            8, 8, reference_octaves, seed=3,
            noise_factory=GradientField, observer=seen.append,
        )

        assert seen == [result.height_range]
        assert isinstance(seen[0], HeightRange)

    def test_opensimplex_heights_in_unit_range(self, reference_octaves):
        result = generate(50, 30, reference_octaves, seed=42)

        assert 0.0 <= result.height_range.minimum <= result.height_range.maximum <= 1.0


class TestValidation:
    """Invalid input is rejected before any noise is built."""

    def test_invalid_grid(self, reference_octaves):
        def factory(seed):
            raise AssertionError("noise should not be constructed")

        with pytest.raises(InvalidGridError):
            generate(0, 10, reference_octaves, seed=1, noise_factory=factory)

    def test_empty_octaves(self):
        with pytest.raises(InvalidOctaveSpecError):
            generate(10, 10, [], seed=1)


class TestOpenSimplexField:
    """Test the default noise source."""

    def test_values_in_unit_range(self):
        field = OpenSimplexField(seed=7)
        values = [field.eval(x * 0.37, y * 0.53) for x in range(20) for y in range(20)]

        assert all(0.0 <= v <= 1.0 for v in values)

    def test_deterministic_for_seed(self):
        assert OpenSimplexField(5).eval(1.3, 2.7) == OpenSimplexField(5).eval(1.3, 2.7)

    def test_grid_matches_points(self):
        field = OpenSimplexField(seed=21)
        xs = np.array([0.0, 0.4, 1.7, 3.2])
        ys = np.array([0.1, 2.5, 4.4])

        grid = field.eval_grid(xs, ys)

        assert grid.shape == (3, 4)
        for i, y in enumerate(ys):
            for j, x in enumerate(xs):
                assert grid[i, j] == pytest.approx(field.eval(float(x), float(y)), abs=1e-12)
