"""
Evaluation of points on 2D parametric curves given by a small fixed set of poles.

Supported families:
- linear segment (2 poles)
- quadratic and cubic Bezier curves (3 and 4 poles)
- uniform Catmull-Rom segment (4 poles), interpolates the two inner poles
- uniform cubic B-spline segment (4 poles), approximates the poles

Every function takes the poles as separate parameters and a parameter 't'.
't' can be a float, giving a point of shape (2,), or an array of shape (N,),
giving points of shape (N, 2). The formulas are polynomials in 't', values
outside [0, 1] are evaluated as the polynomial continuation, no clamping is done.
"""
import enum
import numpy as np

from .errors import ParamError
from .vector import add, subtract, scale, as_point


class SplineFamily(enum.Enum):
    """
    Closed set of the curve families. Value is (name, number of poles).
    """
    LINEAR = ("Linear", 2)
    QUADRATIC_BEZIER = ("QuadraticBezier", 3)
    CUBIC_BEZIER = ("CubicBezier", 4)
    CATMULL_ROM = ("CatmullRom", 4)
    CUBIC_BSPLINE_BASIS = ("CubicBSplineBasis", 4)

    def __init__(self, label, arity):
        self.label = label
        self.arity = arity

    @classmethod
    def from_name(cls, name: str) -> 'SplineFamily':
        """
        Find family by its name, e.g. 'CubicBezier', 'cubic_bezier' or 'CUBIC_BEZIER'.
        """
        key = str(name).replace("_", "").replace("-", "").replace(" ", "").lower()
        for family in cls:
            if key == family.label.lower():
                return family
        raise ParamError(f"Unknown spline family: '{name}', expected one of: {[f.label for f in cls]}")

    def __str__(self):
        return self.label


def check_poles(family, poles):
    """
    Check number and shape of the poles for given family.
    :param family: SplineFamily
    :param poles: Sequence of 2D points.
    :return: Copy of poles as np.array of shape (family.arity, 2).
    """
    if not hasattr(poles, '__len__') or len(poles) != family.arity:
        n_poles = len(poles) if hasattr(poles, '__len__') else None
        raise ParamError(f"Family {family} needs {family.arity} poles, got {n_poles}.")
    for i, pole in enumerate(poles):
        if not hasattr(pole, '__len__') or len(pole) != 2:
            raise ParamError(f"Pole {i}: {pole} is not a 2D point.")
        for x in pole:
            if not isinstance(x, (int, float, np.integer, np.floating)):
                raise ParamError(f"Pole {i}: coordinate {x} of type {type(x)}, expected a number.")
    return np.array(poles, dtype=float)


def linear(p0, p1, t):
    t = np.asarray(t, dtype=float)
    return add(scale(p0, 1 - t), scale(p1, t))


def quadratic_bezier(p0, p1, p2, t):
    t = np.asarray(t, dtype=float)
    u = 1 - t
    return scale(p0, u * u) + scale(p1, 2 * u * t) + scale(p2, t * t)


def cubic_bezier(p0, p1, p2, p3, t):
    """
    Cubic Bezier curve in Bernstein form.
    Interpolates end poles: value at t=0 is p0, value at t=1 is p3.
    """
    t = np.asarray(t, dtype=float)
    u = 1 - t
    return (scale(p0, u * u * u)
            + scale(p1, 3 * u * u * t)
            + scale(p2, 3 * u * t * t)
            + scale(p3, t * t * t))


def catmull_rom(p0, p1, p2, p3, t):
    """
    Uniform Catmull-Rom segment running from p1 (t=0) to p2 (t=1).
    Outer poles p0, p3 only determine the tangents at the segment ends.
    """
    t = np.asarray(t, dtype=float)
    t2 = t * t
    t3 = t2 * t
    q0 = -t3 + 2 * t2 - t
    q1 = 3 * t3 - 5 * t2 + 2
    q2 = -3 * t3 + 4 * t2 + t
    q3 = t3 - t2
    return 0.5 * (scale(p0, q0) + scale(p1, q1) + scale(p2, q2) + scale(p3, q3))


def cubic_bspline_basis(p0, p1, p2, p3, t):
    """
    Segment of the uniform cubic B-spline. Power basis coefficients
    are formed from the poles and evaluated by the Horner scheme.
    The curve does not pass through the poles in general.
    """
    p0, p1, p2, p3 = (as_point(p) for p in (p0, p1, p2, p3))
    c0 = (-p0 + 3 * p1 - 3 * p2 + p3) / 6
    c1 = (3 * p0 - 6 * p1 + 3 * p2) / 6
    c2 = (-3 * p0 + 3 * p2) / 6
    c3 = (p0 + 4 * p1 + p2) / 6
    t = np.asarray(t, dtype=float)
    return add(c3, scale(add(c2, scale(add(c1, scale(c0, t)), t)), t))


def eval_curve(family, poles, t):
    """
    Evaluate curve of given family.
    :param family: SplineFamily or its name.
    :param poles: Sequence of family.arity 2D points.
    :param t: float or array of shape (N,)
    :return: point (2,) or points (N, 2)
    """
    if not isinstance(family, SplineFamily):
        family = SplineFamily.from_name(family)
    poles = check_poles(family, poles)
    if family is SplineFamily.LINEAR:
        return linear(*poles, t)
    elif family is SplineFamily.QUADRATIC_BEZIER:
        return quadratic_bezier(*poles, t)
    elif family is SplineFamily.CUBIC_BEZIER:
        return cubic_bezier(*poles, t)
    elif family is SplineFamily.CATMULL_ROM:
        return catmull_rom(*poles, t)
    elif family is SplineFamily.CUBIC_BSPLINE_BASIS:
        return cubic_bspline_basis(*poles, t)
    raise ParamError(f"Unsupported spline family: {family}")
