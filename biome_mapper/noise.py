# biome_mapper/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides functions for generating 2D Perlin noise. It is designed
to be a pure, stateless utility.

Data Contract:
---------------
- Inputs:
    - p: A pre-shuffled NumPy permutation table (int array, length 512).
    - x, y: Scalar coordinates, or NumPy arrays of coordinates.
- Outputs:
    - Raw noise values in the closed range [-1, 1], or normalized values in
      [0, 1] from `normalized_perlin_2d`.
- Side Effects: None.
- Invariants: The same (x, y, table) always produces the same value, and the
  scalar and array forms agree element for element.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS

# Pre-defined gradient vectors for performance.
_GRADIENT_VECTORS = np.array([[0, 1], [0, -1], [1, 0], [-1, 0]])

_SCALE_FACTOR = DEFAULTS.NOISE_SCALE_FACTOR

def create_permutation_table(seed: int) -> np.ndarray:
    """
    Builds a seeded permutation table. The shuffled range is stacked twice so
    that `p[p[i] + j]` never needs to wrap. The returned array is read-only.
    """
    p = np.arange(DEFAULTS.PERMUTATION_SIZE, dtype=np.int64)
    rng = np.random.default_rng(seed)
    rng.shuffle(p)
    table = np.stack([p, p]).flatten()
    table.flags.writeable = False
    return table

@njit
def _lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def _gradient(h, x, y):
    """Calculates the dot product between a gradient vector and coordinates."""
    g = _GRADIENT_VECTORS[h % 4]
    return g[0] * x + g[1] * y

@njit
def perlin_2d(p, x, y):
    """
    Single-octave 2D Perlin noise at (x, y) using the permutation table `p`.
    Returns a value clamped to [-1, 1].
    """
    xi = int(np.floor(x))
    yi = int(np.floor(y))

    xf = x - xi
    yf = y - yi

    u = _fade(xf)
    v = _fade(yf)

    px0 = xi % 256
    px1 = (px0 + 1) % 256
    py0 = yi % 256
    py1 = (py0 + 1) % 256

    # Numba requires scalar indexing
    idx00 = p[p[px0] + py0]
    idx01 = p[p[px0] + py1]
    idx10 = p[p[px1] + py0]
    idx11 = p[p[px1] + py1]

    g00 = _gradient(idx00, xf, yf)
    g01 = _gradient(idx01, xf, yf - 1)
    g10 = _gradient(idx10, xf - 1, yf)
    g11 = _gradient(idx11, xf - 1, yf - 1)

    x1 = _lerp(g00, g10, u)
    x2 = _lerp(g01, g11, u)
    value = _lerp(x1, x2, v) * _SCALE_FACTOR

    return min(max(value, -1.0), 1.0)

@njit
def _perlin_noise_flat(p, x, y):
    out = np.empty(x.shape[0])
    for i in range(x.shape[0]):
        out[i] = perlin_2d(p, x[i], y[i])
    return out

def perlin_noise_2d(p: np.ndarray, x, y) -> np.ndarray:
    """
    Evaluates `perlin_2d` over coordinate arrays of any (broadcastable) shape.
    The shape of the output matches the broadcast shape of x and y.
    """
    x_arr, y_arr = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
    flat = _perlin_noise_flat(p, np.ascontiguousarray(x_arr).ravel(), np.ascontiguousarray(y_arr).ravel())
    return flat.reshape(x_arr.shape)

def normalized_perlin_2d(p: np.ndarray, x, y):
    """
    Perlin noise rescaled from [-1, 1] to [0, 1]. Scalars in, float out;
    arrays in, array out.
    """
    if np.ndim(x) == 0 and np.ndim(y) == 0:
        return perlin_2d(p, float(x), float(y)) / 2.0 + 0.5
    return perlin_noise_2d(p, x, y) / 2.0 + 0.5
