"""
Seeded 2D noise sources.

The generator only depends on the NoiseField contract: a deterministic
function of (x, y) returning a value in [0, 1). The default implementation
wraps the ``opensimplex`` package and rescales its [-1, 1] output.
"""

import numpy as np
from opensimplex import OpenSimplex


class NoiseField:
    """
    Base class for seeded noise sources.

    Subclasses implement ``eval``. ``eval_grid`` samples the field on the
    cartesian product of two coordinate vectors and may be overridden with a
    vectorized version, as long as it returns exactly what ``eval`` would.
    """

    def eval(self, x: float, y: float) -> float:
        raise NotImplementedError

    def eval_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """
        Evaluate the field at every (xs[j], ys[i]).

        Returns:
            float64 array of shape (len(ys), len(xs)), indexed [i, j].
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        out = np.empty((ys.size, xs.size), dtype=np.float64)
        for i, y in enumerate(ys):
            for j, x in enumerate(xs):
                out[i, j] = self.eval(float(x), float(y))
        return out


class OpenSimplexField(NoiseField):
    """OpenSimplex noise normalized to [0, 1)."""

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._simplex = OpenSimplex(seed=self.seed)

    def eval(self, x: float, y: float) -> float:
        return (self._simplex.noise2(x, y) + 1.0) / 2.0

    def eval_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        # noise2array returns shape (ys.size, xs.size)
        raw = self._simplex.noise2array(xs, ys)
        return (np.asarray(raw, dtype=np.float64) + 1.0) / 2.0

    def __repr__(self):
        return f"OpenSimplexField(seed={self.seed})"
