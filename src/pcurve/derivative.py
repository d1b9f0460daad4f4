"""
Analytic derivatives of the cubic Bezier curve.
Same calling convention as in `curve`: separate poles, 't' float or array.
"""
import numpy as np

from .vector import subtract, scale, as_point, EPS


def cubic_bezier_diff(p0, p1, p2, p3, t):
    """
    First derivative of the cubic Bezier curve with respect to 't'.
    """
    t = np.asarray(t, dtype=float)
    u = 1 - t
    return (scale(subtract(p1, p0), 3 * u * u)
            + scale(subtract(p2, p1), 6 * u * t)
            + scale(subtract(p3, p2), 3 * t * t))


def cubic_bezier_diff2(p0, p1, p2, p3, t):
    """
    Second derivative of the cubic Bezier curve with respect to 't'.
    """
    t = np.asarray(t, dtype=float)
    p0, p1, p2, p3 = (as_point(p) for p in (p0, p1, p2, p3))
    return scale(p0 - 2 * p1 + p2, 6 * (1 - t)) + scale(p1 - 2 * p2 + p3, 6 * t)


def cubic_bezier_curvature(p0, p1, p2, p3, t, eps=EPS):
    """
    Signed curvature, positive for the curve turning counter-clockwise.
    Zero is returned where |d'| <= eps, i.e. at cusps and for coincident poles.
    :return: float or array of shape (N,)
    """
    d1 = as_point(cubic_bezier_diff(p0, p1, p2, p3, t))
    d2 = as_point(cubic_bezier_diff2(p0, p1, p2, p3, t))
    cross = d1[..., 0] * d2[..., 1] - d1[..., 1] * d2[..., 0]
    speed = np.linalg.norm(d1, axis=-1)
    curvature = np.divide(cross, speed ** 3, out=np.zeros_like(cross), where=speed > eps)
    if curvature.ndim == 0:
        return float(curvature)
    return curvature
