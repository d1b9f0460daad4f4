"""
Debug plotting of curves, their poles and tangent/normal segments.
Matplotlib or plotly library is used as backend.
"""
import numpy as np

import plotly.offline as pl
import plotly.graph_objs as go
import matplotlib.pyplot as plt

from .config import make_config
from .tools import catch_time


class PlottingPlotly:
    def __init__(self, filename_base='curve_plot_2d'):
        self.filename_base = filename_base
        self.i_figure = -1
        self._reinit()

    def _reinit(self):
        self.i_figure += 1
        self.data_2d = []

    def add_curve_2d(self, X, Y, **kwargs):
        self.data_2d.append(go.Scatter(x=X, y=Y, mode='lines', **kwargs))

    def add_points_2d(self, X, Y, **kwargs):
        marker = dict(
            size=10,
            color='red',
        )
        self.data_2d.append(go.Scatter(x=X, y=Y,
                                       mode='markers',
                                       marker=marker, **kwargs))

    def make_figure(self):
        return go.Figure(data=self.data_2d)

    def show(self, auto_open=True):
        """
        Show added plots and clear the list for other plotting.
        :return: name of the written html file or None
        """
        filename = None
        if self.data_2d:
            filename = "%s_%d.html" % (self.filename_base, self.i_figure)
            pl.plot(self.make_figure(), filename=filename, auto_open=auto_open)
        self._reinit()
        return filename


class PlottingMatplot:
    def __init__(self):
        self.fig_2d, self.ax_2d = plt.subplots()

    def add_curve_2d(self, X, Y, **kwargs):
        return self.ax_2d.plot(X, Y, **kwargs)

    def add_points_2d(self, X, Y, **kwargs):
        kwargs.setdefault('color', 'red')
        return self.ax_2d.plot(X, Y, 'o', **kwargs)

    def show(self):
        """
        Show added plots and start a new figure.
        """
        plt.show()
        self.fig_2d, self.ax_2d = plt.subplots()


class Plotting:
    """
    Debug plotting class. Several 2d plots can be added and finally displayed on common figure
    calling self.show().
    """
    def __init__(self, backend=None, cfg=None):
        """
        :param backend: PlottingPlotly (default) or PlottingMatplot
        :param cfg: sampling and frame settings, see `config`
        """
        if backend is None:
            backend = PlottingPlotly()
        if cfg is None:
            cfg = make_config()
        self.backend = backend
        self.cfg = cfg

    def plot_2d(self, X, Y):
        """
        Add line scatter plot. Every plot use automatically different color.
        :param X: x-coords of points
        :param Y: y-coords of points
        """
        self.backend.add_curve_2d(X, Y)

    def scatter_2d(self, X, Y):
        self.backend.add_points_2d(X, Y)

    def plot_curve_2d(self, curve, n_points=None, poles=False):
        """
        Add plot of a 2d curve.
        :param curve: pcurve.Curve
        :param n_points: Number of evaluated points, default self.cfg.sampling.n_points.
        :param poles: Plot also the poles.
        """
        x_coord, y_coord = curve.sample(n_points, cfg=self.cfg).T
        self.backend.add_curve_2d(x_coord, y_coord)
        if poles:
            self.plot_curve_poles_2d(curve)

    def plot_curve_poles_2d(self, curve):
        x_poles, y_poles = curve.poles.T
        return self.backend.add_points_2d(x_poles, y_poles)

    def plot_segment_2d(self, start, end):
        x_coord, y_coord = np.array([start, end], dtype=float).T
        self.backend.add_curve_2d(x_coord, y_coord)

    def plot_frames_2d(self, curve, n_points=None, length=None):
        """
        Add tangent and normal segments at 'n_points' equidistant parameters of a cubic Bezier curve.
        Defaults from self.cfg.frame.
        """
        tangents, normals = curve.sample_frames(n_points, length, cfg=self.cfg)
        for segment in (*tangents, *normals):
            self.plot_segment_2d(*segment)

    def show(self):
        """
        Display added plots. Empty the queue.
        """
        with catch_time("show plots"):
            return self.backend.show()
