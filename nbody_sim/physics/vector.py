"""Small-vector math for 2D and 3D body state.

Vectors are 1-D float64 NumPy arrays. ``add``, ``sub`` and ``scale`` return
new arrays; the ``*_in_place`` variants write into (and return) their first
argument, so every mutation is visible at the call site.
"""

import math
import numpy as np


def vector(*components) -> np.ndarray:
    """Create a vector from its components."""
    return np.array(components, dtype=np.float64)


def zeros(dim: int) -> np.ndarray:
    """Create a zero vector of dimension ``dim``."""
    return np.zeros(dim, dtype=np.float64)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.add(a, b)


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.subtract(a, b)


def scale(a: np.ndarray, k: float) -> np.ndarray:
    return np.multiply(a, k)


def length_squared(a: np.ndarray) -> float:
    return float(np.dot(a, a))


def length(a: np.ndarray) -> float:
    return math.sqrt(length_squared(a))


def add_in_place(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """a += b"""
    np.add(a, b, out=a)
    return a


def sub_in_place(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """a -= b"""
    np.subtract(a, b, out=a)
    return a


def scale_in_place(a: np.ndarray, k: float) -> np.ndarray:
    """a *= k"""
    np.multiply(a, k, out=a)
    return a
