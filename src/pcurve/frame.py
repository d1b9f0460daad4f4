"""
Unit tangent and normal vectors of the cubic Bezier curve and the short
line segments along them, centered at the curve point (used for drawing).

Normalization is guarded: derivative with magnitude not exceeding 'eps'
(default `vector.EPS`) is used as is. The segments then collapse to the curve point,
no error is raised.
"""
from . import vector as vec
from .curve import cubic_bezier
from .derivative import cubic_bezier_diff


def _centered_segment(point, direction, length):
    half = vec.scale(direction, 0.5 * length)
    return vec.subtract(point, half), vec.add(point, half)


def tangent_at(p0, p1, p2, p3, t, eps=vec.EPS):
    return vec.normalize(cubic_bezier_diff(p0, p1, p2, p3, t), eps)


def normal_at(p0, p1, p2, p3, t, eps=vec.EPS):
    """
    Tangent rotated counter-clockwise by 90 degrees.
    """
    return vec.normalize(vec.perp(tangent_at(p0, p1, p2, p3, t, eps)), eps)


def tangent_line(p0, p1, p2, p3, t, length=1.0, eps=vec.EPS):
    """
    Segment of given 'length' along the tangent, centered at the curve point.
    :return: (start, end)
    """
    point = cubic_bezier(p0, p1, p2, p3, t)
    return _centered_segment(point, tangent_at(p0, p1, p2, p3, t, eps), length)


def normal_line(p0, p1, p2, p3, t, length=1.0, eps=vec.EPS):
    """
    Segment of given 'length' along the normal, centered at the curve point.
    :return: (start, end)
    """
    point = cubic_bezier(p0, p1, p2, p3, t)
    return _centered_segment(point, normal_at(p0, p1, p2, p3, t, eps), length)
