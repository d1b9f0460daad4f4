"""
Curve value object: family tag with its poles.
"""
import numpy as np

from .errors import ParamError
from .curve import SplineFamily, check_poles, eval_curve
from . import derivative, frame, sampling


class Curve:
    """
    Curve of one of the SplineFamily given by its poles.
    The poles are copied and validated on construction, later changes
    of the caller's list do not affect the curve.
    """

    @classmethod
    def make(cls, family_name, poles):
        return cls(SplineFamily.from_name(family_name), poles)

    def __init__(self, family, poles):
        """
        :param family: SplineFamily or its name.
        :param poles: Sequence of family.arity 2D points.
        """
        if not isinstance(family, SplineFamily):
            family = SplineFamily.from_name(family)
        self.family = family
        self.poles = check_poles(family, poles)
        self.poles.setflags(write=False)

    def __repr__(self):
        return f"Curve({self.family}, {self.poles.tolist()})"

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return self.family is other.family and np.array_equal(self.poles, other.poles)

    def __hash__(self):
        return hash((self.family, self.poles.tobytes()))

    def eval(self, t):
        return eval_curve(self.family, self.poles, t)

    def eval_array(self, t_vec):
        """
        :param t_vec: array of parameters, shape (N,)
        :return: points, shape (N, 2)
        """
        return self.eval(np.asarray(t_vec, dtype=float).reshape(-1))

    def _bezier_poles(self):
        if self.family is not SplineFamily.CUBIC_BEZIER:
            raise ParamError(f"Derivatives are implemented only for {SplineFamily.CUBIC_BEZIER}, not for {self.family}.")
        return self.poles

    def eval_diff(self, t):
        return derivative.cubic_bezier_diff(*self._bezier_poles(), t)

    def eval_diff2(self, t):
        return derivative.cubic_bezier_diff2(*self._bezier_poles(), t)

    def curvature(self, t):
        return derivative.cubic_bezier_curvature(*self._bezier_poles(), t)

    def tangent(self, t):
        return frame.tangent_at(*self._bezier_poles(), t)

    def normal(self, t):
        return frame.normal_at(*self._bezier_poles(), t)

    def tangent_line(self, t, length=1.0):
        return frame.tangent_line(*self._bezier_poles(), t, length)

    def normal_line(self, t, length=1.0):
        return frame.normal_line(*self._bezier_poles(), t, length)

    def sample(self, n_points=None, t_range=None, cfg=None):
        """
        Polyline of the curve, see `sampling.sample_polyline`.
        """
        return sampling.sample_polyline(self.family, self.poles, n_points, t_range, cfg)

    def sample_frames(self, n_points=None, length=None, t_range=None, cfg=None):
        return sampling.sample_frames(self._bezier_poles(), n_points, length, t_range, cfg)
