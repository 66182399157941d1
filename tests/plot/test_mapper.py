"""
Tests for mapping curves onto the plot canvas.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from blviz.data.axes import Selection
from blviz.data.dataset import Record
from blviz.data.selection import select_curve
from blviz.plot.mapper import LINE, MOVE, PathCommand, PlotDomain, PlotPath, map_curve


def rec(x, delta, nu=1e-5, u_inf=10.0):
    return Record(nu, u_inf, x, math.nan, delta)


class TestPlotDomain:

    def test_default_geometry(self):
        d = PlotDomain()
        assert (d.plot_left, d.plot_right, d.plot_top, d.plot_bottom) == (50, 750, 50, 550)
        assert (d.plot_width, d.plot_height) == (700, 500)
        assert d.center == (400, 300)

    def test_corner_mapping(self):
        d = PlotDomain()
        assert d.x_to_pixel(0.5) == pytest.approx(50.0)
        assert d.x_to_pixel(5.0) == pytest.approx(750.0)
        assert d.y_to_pixel(0.0) == pytest.approx(550.0)
        assert d.y_to_pixel(0.4) == pytest.approx(50.0)

    def test_y_inverted(self):
        d = PlotDomain()
        assert d.y_to_pixel(0.2) < d.y_to_pixel(0.1)

    def test_array_mapping(self):
        d = PlotDomain()
        assert_allclose(d.x_to_pixel(np.array([0.5, 2.75, 5.0])), [50.0, 400.0, 750.0])

    def test_degenerate_domain_rejected(self):
        with pytest.raises(ValueError):
            PlotDomain(x_min=1.0, x_max=1.0)
        with pytest.raises(ValueError):
            PlotDomain(width=100, margin_left=50, margin_right=50)


class TestMapCurve:

    def test_simple_path(self):
        path = map_curve([rec(0.5, 0.01), rec(1.0, 0.02)])
        assert [c.op for c in path] == [MOVE, LINE]
        assert path.commands[0].x == pytest.approx(50.0)
        assert path.commands[0].y == pytest.approx(537.5)
        assert path.commands[1].x == pytest.approx(50.0 + 700.0 / 9.0)
        assert path.commands[1].y == pytest.approx(525.0)

    def test_empty_curve(self):
        assert map_curve(()) is None

    def test_all_points_left_of_domain(self):
        assert map_curve([rec(0.1, 0.01), rec(0.3, 0.02), rec(0.49, 0.03)]) is None

    def test_leading_points_clipped(self, clipped_dataset):
        curve = select_curve(clipped_dataset, Selection(1e-5, 5.0))
        path = map_curve(curve)
        assert len(path) == 3
        assert [c.op for c in path] == [MOVE, LINE, LINE]

    def test_clipped_points_never_in_path(self, clipped_dataset):
        domain = PlotDomain()
        curve = select_curve(clipped_dataset, Selection(1e-5, 5.0))
        path = map_curve(curve, domain)
        assert all(c.x >= domain.x_to_pixel(domain.x_min) for c in path)

    def test_x_min_itself_is_kept(self):
        path = map_curve([rec(0.5, 0.0)])
        assert path.commands == (PathCommand(MOVE, 50.0, 550.0),)

    def test_interior_clip_restarts_segment(self):
        # Unsorted input: the dropped point sits between two kept ones
        path = map_curve([rec(1.0, 0.01), rec(0.3, 0.01), rec(2.0, 0.02), rec(3.0, 0.03)])
        assert [c.op for c in path] == [MOVE, MOVE, LINE]
        assert path.n_segments == 2

    def test_non_finite_points_break_the_line(self):
        path = map_curve([rec(0.6, 0.01), rec(1.0, math.nan), rec(2.0, 0.02), rec(3.0, 0.03)])
        assert [c.op for c in path] == [MOVE, MOVE, LINE]
        assert all(math.isfinite(c.x) and math.isfinite(c.y) for c in path)

    def test_points_beyond_x_max_not_clipped(self):
        path = map_curve([rec(4.0, 0.01), rec(6.0, 0.5)])
        assert len(path) == 2
        assert path.commands[1].x > 750.0
        assert path.commands[1].y < 50.0

    def test_custom_domain(self):
        domain = PlotDomain(x_min=0.0, x_max=1.0, y_min=0.0, y_max=1.0,
                            width=200, height=100, margin_left=0, margin_right=0,
                            margin_top=0, margin_bottom=0)
        path = map_curve([rec(0.25, 0.5)], domain)
        assert path.commands[0] == PathCommand(MOVE, 50.0, 50.0)

    def test_idempotent(self, clipped_dataset):
        sel = Selection(1e-5, 5.0)
        first = map_curve(select_curve(clipped_dataset, sel))
        second = map_curve(select_curve(clipped_dataset, sel))
        assert first == second


class TestPlotPath:

    @pytest.fixture
    def two_segment_path(self):
        return PlotPath((
            PathCommand(MOVE, 50.0, 500.0),
            PathCommand(LINE, 100.0, 450.0),
            PathCommand(MOVE, 200.0, 400.0),
            PathCommand(LINE, 300.0, 350.5),
        ))

    def test_svg_d(self, two_segment_path):
        assert two_segment_path.to_svg_d(precision=1) == (
            "M 50.0 500.0 L 100.0 450.0 M 200.0 400.0 L 300.0 350.5"
        )

    def test_segments(self, two_segment_path):
        segs = two_segment_path.segments()
        assert len(segs) == 2
        assert_allclose(segs[1], [[200.0, 400.0], [300.0, 350.5]])

    def test_to_xy_inserts_gaps(self, two_segment_path):
        xs, ys = two_segment_path.to_xy()
        assert xs == [50.0, 100.0, None, 200.0, 300.0]
        assert ys == [500.0, 450.0, None, 400.0, 350.5]
