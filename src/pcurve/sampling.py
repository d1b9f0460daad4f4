"""
Sampling of curves on a parameter grid, e.g. to get a polyline for display.

Sampling settings not given explicitly are taken from the configuration
'cfg' (see `config`), the defaults are used when no 'cfg' is passed.
"""
import numpy as np

from .errors import ParamError
from .curve import eval_curve, check_poles, SplineFamily
from .config import make_config
from . import frame
from .tools import report


def parameter_grid(n_points, t_range=(0.0, 1.0)):
    """
    Equidistant parameters including both ends of 't_range'.
    """
    if int(n_points) < 2:
        raise ParamError(f"Need at least 2 sample points, got {n_points}.")
    t_min, t_max = t_range
    return np.linspace(t_min, t_max, int(n_points))


def _pick(value, default):
    return default if value is None else value


@report
def sample_polyline(family, poles, n_points=None, t_range=None, cfg=None):
    """
    :param family: SplineFamily or its name.
    :param poles: Sequence of family.arity 2D points.
    :param n_points, t_range: default cfg.sampling.n_points, cfg.sampling.t_range
    :return: array of points, shape (n_points, 2)
    """
    if cfg is None:
        cfg = make_config()
    n_points = _pick(n_points, cfg.sampling.n_points)
    t_range = _pick(t_range, cfg.sampling.t_range)
    return eval_curve(family, poles, parameter_grid(n_points, t_range))


@report
def sample_frames(poles, n_points=None, length=None, t_range=None, cfg=None):
    """
    Tangent and normal segments along a cubic Bezier curve.
    :param poles: four 2D points
    :param n_points, length: default cfg.frame.n_points, cfg.frame.length
    :param t_range: default cfg.sampling.t_range
    Normalization threshold is cfg.frame.eps.
    :return: (tangents, normals), both arrays of shape (n_points, 2, 2),
        [i, 0, :] is the start and [i, 1, :] the end of the i-th segment.
    """
    if cfg is None:
        cfg = make_config()
    n_points = _pick(n_points, cfg.frame.n_points)
    length = _pick(length, cfg.frame.length)
    t_range = _pick(t_range, cfg.sampling.t_range)
    eps = cfg.frame.eps

    poles = check_poles(SplineFamily.CUBIC_BEZIER, poles)
    t_vec = parameter_grid(n_points, t_range)
    tangents = np.stack(frame.tangent_line(*poles, t_vec, length, eps), axis=1)
    normals = np.stack(frame.normal_line(*poles, t_vec, length, eps), axis=1)
    return tangents, normals
