# MIT License (see LICENSE)
"""
Utility functions for vector math and random draws.

All vector functions operate on 2D vectors represented as numpy arrays
of shape (2,).
"""
from __future__ import annotations

import numpy as np

from .constants import FALLBACK_NORMAL


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 0.0) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns FALLBACK_NORMAL when |v| <= eps, so coincident points still
    produce a usable direction instead of NaN.
    """
    n = norm(v)
    if n <= eps:
        return f64(FALLBACK_NORMAL)
    return v / n


def random_color(rng: np.random.Generator) -> tuple[int, int, int]:
    """Uniform random RGB triple, each channel in [0, 255]."""
    r, g, b = rng.integers(0, 256, size=3)
    return (int(r), int(g), int(b))
