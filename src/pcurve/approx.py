"""
Epsilon tolerant comparison of floats and points.
"""
import numpy as np

DEFAULT_EPS = 1e-6


def approx_equal(a: float, b: float, eps: float = DEFAULT_EPS) -> bool:
    return abs(a - b) <= eps


def points_approx_equal(p, q, eps: float = DEFAULT_EPS) -> bool:
    """
    True if all coordinates of 'p' and 'q' differ at most by 'eps'.
    Works for single points as well as for arrays of points of the same shape.
    """
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    if p.shape != q.shape:
        return False
    return bool(np.all(np.abs(p - q) <= eps))
