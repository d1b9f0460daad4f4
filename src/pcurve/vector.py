"""
Elementary 2D vector arithmetic.

Points and vectors are numpy arrays with the coordinates on the last axis,
so every function works for a single vector of shape (2,) as well as
for an array of vectors of shape (N, 2).
"""
import logging
import numpy as np

# Threshold of the vector magnitude under which the normalization is skipped.
EPS = 1e-6


def as_point(p):
    return np.asarray(p, dtype=float)


def add(a, b):
    return as_point(a) + as_point(b)


def subtract(a, b):
    return as_point(a) - as_point(b)


def scale(v, s):
    """
    Multiply vector(s) 'v' by scalar(s) 's'.
    :param v: shape (2,) or (N, 2)
    :param s: float or array of shape (N,) matching the leading axis of 'v'
    """
    s = np.asarray(s, dtype=float)
    return as_point(v) * s[..., None]


def dot(a, b):
    return np.sum(as_point(a) * as_point(b), axis=-1)


def norm(v):
    return np.linalg.norm(as_point(v), axis=-1)


def perp(v):
    """
    Rotate by 90 degrees counter-clockwise: (x, y) -> (-y, x).
    """
    v = as_point(v)
    return np.stack([-v[..., 1], v[..., 0]], axis=-1)


def normalize(v, eps=EPS):
    """
    Scale vector(s) to the unit length.

    Vectors with magnitude not exceeding 'eps' are returned unchanged,
    so the result is defined for any input, including the zero vector.
    :param v: shape (2,) or (N, 2)
    :param eps: magnitude threshold
    :return: array of the same shape as 'v'
    """
    v = as_point(v)
    mag = norm(v)[..., None]
    regular = mag > eps
    if not np.all(regular):
        logging.debug(f"Skip normalization of {np.sum(~regular)} degenerate vector(s), eps: {eps}")
    return np.divide(v, mag, out=v.copy(), where=regular)
