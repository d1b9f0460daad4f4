import logging
import pytest
import numpy as np

from pcurve import sampling, ParamError, SplineFamily
from pcurve import curve as pc
from pcurve import vector as vec
from fixtures import random_poles


class TestSampling:

    def test_parameter_grid(self):
        assert np.allclose(sampling.parameter_grid(3), [0, 0.5, 1])
        assert np.allclose(sampling.parameter_grid(3, (1, 2)), [1, 1.5, 2])
        with pytest.raises(ParamError):
            sampling.parameter_grid(1)

    def test_sample_polyline(self, caplog):
        caplog.set_level(logging.INFO)
        poles = random_poles(4, seed=40)
        for family in (SplineFamily.CUBIC_BEZIER, SplineFamily.CATMULL_ROM, SplineFamily.CUBIC_BSPLINE_BASIS):
            points = sampling.sample_polyline(family, poles, n_points=50)
            assert points.shape == (50, 2)
            assert np.allclose(points[17], pc.eval_curve(family, poles, 17 / 49))
        points = sampling.sample_polyline("CubicBezier", poles)
        assert points.shape == (100, 2)
        assert np.allclose(points[0], poles[0])
        assert np.allclose(points[-1], poles[3])
        assert "DONE pcurve.sampling.sample_polyline" in caplog.text

        with pytest.raises(ParamError):
            sampling.sample_polyline(SplineFamily.LINEAR, poles)

    def test_sample_frames(self):
        poles = random_poles(4, seed=41)
        tangents, normals = sampling.sample_frames(poles, n_points=9, length=0.5)
        assert tangents.shape == normals.shape == (9, 2, 2)
        assert np.allclose(vec.norm(tangents[:, 1] - tangents[:, 0]), 0.5)
        assert np.allclose(vec.dot(tangents[:, 1] - tangents[:, 0], normals[:, 1] - normals[:, 0]), 0.0)
        curve_points = sampling.sample_polyline(SplineFamily.CUBIC_BEZIER, poles, n_points=9)
        assert np.allclose(tangents.mean(axis=1), curve_points)
        assert np.allclose(normals.mean(axis=1), curve_points)

        zero_t, zero_n = sampling.sample_frames([(0, 0)] * 4, n_points=3)
        assert np.array_equal(zero_t, np.zeros((3, 2, 2)))
        assert np.array_equal(zero_n, np.zeros((3, 2, 2)))
