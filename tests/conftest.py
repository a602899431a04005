"""Shared fixtures and stub noise sources."""

import pytest

from py_heightmap.core.noise_field import NoiseField


class ConstantField(NoiseField):
    """Returns the same value everywhere."""

    def __init__(self, value: float):
        self.value = value

    def eval(self, x: float, y: float) -> float:
        return self.value


class GradientField(NoiseField):
    """Deterministic, coordinate-dependent stub: value depends on x and y."""

    def __init__(self, seed: int = 0):
        self.seed = seed

    def eval(self, x: float, y: float) -> float:
        return ((x * 0.37 + y * 0.11 + self.seed * 0.01) % 1.0)


class RecordingField(NoiseField):
    """Records every coordinate it is sampled at."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = []

    def eval(self, x: float, y: float) -> float:
        self.calls.append((x, y))
        return self.value


def constant_factory(value: float):
    return lambda seed: ConstantField(value)


@pytest.fixture
def reference_octaves():
    return [(12.5, 1.0), (5.6, 0.5), (2.5, 0.25)]


@pytest.fixture
def gradient_field():
    return GradientField(seed=3)
