"""
Common code for tests.
"""
import numpy as np


def random_poles(n_poles, seed=0, scale=10.0):
    """
    Reproducible list of 'n_poles' random 2D points.
    """
    rng = np.random.default_rng(seed)
    return [tuple(p) for p in rng.uniform(-scale, scale, size=(n_poles, 2))]


def central_diff(fn, t, h=1e-4):
    return (np.asarray(fn(t + h)) - np.asarray(fn(t - h))) / (2 * h)


def central_diff2(fn, t, h=1e-3):
    return (np.asarray(fn(t + h)) - 2 * np.asarray(fn(t)) + np.asarray(fn(t - h))) / (h * h)
