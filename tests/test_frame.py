import logging
import numpy as np

from pcurve import curve as pc
from pcurve import derivative as pd
from pcurve import frame
from pcurve import vector as vec
from pcurve.approx import approx_equal, points_approx_equal
from fixtures import random_poles


t_samples = np.linspace(0.0, 1.0, 21)


class TestTangentNormal:

    def test_unit_vectors(self):
        poles = random_poles(4, seed=20)
        for t in t_samples:
            tangent = frame.tangent_at(*poles, t)
            normal = frame.normal_at(*poles, t)
            assert approx_equal(vec.norm(tangent), 1.0, 1e-9)
            assert approx_equal(vec.norm(normal), 1.0, 1e-9)
            # normal is the tangent rotated counter-clockwise
            assert np.allclose(normal, vec.perp(tangent))

    def test_normal_perpendicular(self):
        for seed in range(5):
            poles = random_poles(4, seed=seed)
            for t in t_samples:
                d = pd.cubic_bezier_diff(*poles, t)
                if vec.norm(d) > vec.EPS:
                    assert abs(vec.dot(frame.normal_at(*poles, t), d)) < 1e-5

    def test_tangent_line(self):
        for seed in range(3):
            poles = random_poles(4, seed=seed)
            for length in (0.5, 1.0, 3.0):
                for t in t_samples:
                    start, end = frame.tangent_line(*poles, t, length=length)
                    assert abs(vec.norm(end - start) - length) < 1e-5
                    # centered at the curve point
                    assert np.allclose((start + end) / 2, pc.cubic_bezier(*poles, t))
                    # along the derivative
                    d = pd.cubic_bezier_diff(*poles, t)
                    assert vec.dot(end - start, d) > 0

    def test_normal_line(self):
        poles = random_poles(4, seed=21)
        for t in t_samples:
            start, end = frame.normal_line(*poles, t, length=2.0)
            assert abs(vec.norm(end - start) - 2.0) < 1e-5
            assert np.allclose((start + end) / 2, pc.cubic_bezier(*poles, t))
            assert abs(vec.dot(end - start, pd.cubic_bezier_diff(*poles, t))) < 1e-5

    def test_default_length(self):
        poles = [(0, 0), (1, 0), (2, 0), (3, 0)]
        start, end = frame.tangent_line(*poles, 0.5)
        assert np.allclose(start, [1.0, 0])
        assert np.allclose(end, [2.0, 0])
        start, end = frame.normal_line(*poles, 0.5)
        assert np.allclose(start, [1.5, -0.5])
        assert np.allclose(end, [1.5, 0.5])

    def test_degenerate(self, caplog):
        caplog.set_level(logging.DEBUG)
        zero = [(0, 0)] * 4
        for t in t_samples:
            start, end = frame.tangent_line(*zero, t, length=2.0)
            assert np.array_equal(start, [0, 0])
            assert np.array_equal(end, [0, 0])
            start, end = frame.normal_line(*zero, t, length=2.0)
            assert np.array_equal(start, [0, 0])
            assert np.array_equal(end, [0, 0])
            assert np.array_equal(frame.normal_at(*zero, t), [0, 0])
        assert "degenerate" in caplog.text

        # coincident first two poles: zero derivative at t=0 only
        poles = [(1, 1), (1, 1), (3, 2), (4, 0)]
        start, end = frame.tangent_line(*poles, 0.0, length=5.0)
        assert points_approx_equal(start, (1, 1))
        assert points_approx_equal(end, (1, 1))
        start, end = frame.tangent_line(*poles, 0.5, length=5.0)
        assert abs(vec.norm(end - start) - 5.0) < 1e-5

    def test_vectorized(self):
        poles = random_poles(4, seed=22)
        starts, ends = frame.tangent_line(*poles, t_samples, length=1.5)
        assert starts.shape == ends.shape == (len(t_samples), 2)
        assert np.allclose(vec.norm(ends - starts), 1.5)
        normals = frame.normal_at(*poles, t_samples)
        assert np.allclose(vec.dot(normals, pd.cubic_bezier_diff(*poles, t_samples)), 0.0, atol=1e-5)
        for i, t in enumerate(t_samples):
            start, end = frame.normal_line(*poles, t, length=1.5)
            n_starts, n_ends = frame.normal_line(*poles, t_samples, length=1.5)
            assert np.allclose(start, n_starts[i])
            assert np.allclose(end, n_ends[i])
