"""
Tests for plotly and matplotlib rendering.
"""

import gzip

import plotly.graph_objects as go
import pytest

from blviz.constants import NO_DATA_MESSAGE
from blviz.data.dataset import Record
from blviz.io.figure import build_figure, save_html
from blviz.io.plotting import plot_curve
from blviz.plot.mapper import PlotDomain, map_curve
from blviz.state import CurveView, ViewState


@pytest.fixture
def ready_view(clipped_dataset):
    return ViewState.from_dataset(clipped_dataset).recompute()


@pytest.fixture
def empty_view(clipped_dataset):
    return ViewState.from_dataset(clipped_dataset).with_indices(nu_index=1).recompute()


class TestBuildFigure:

    def test_curve_trace(self, ready_view):
        fig = build_figure(ready_view)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        xs = list(fig.data[0].x)
        assert xs == [c.x for c in ready_view.path]

    def test_segment_gaps(self):
        curve = (Record(1, 1, 1.0, 0, 0.1), Record(1, 1, 0.2, 0, 0.1), Record(1, 1, 2.0, 0, 0.2))
        view = CurveView(selection=None, curve=curve, path=map_curve(curve), reynolds=None)
        fig = build_figure(view)
        assert list(fig.data[0].x).count(None) == 1

    def test_no_data_notice(self, empty_view):
        fig = build_figure(empty_view)
        assert len(fig.data) == 0
        texts = [a.text for a in fig.layout.annotations]
        assert NO_DATA_MESSAGE in texts

    def test_grid_follows_domain(self, ready_view):
        domain = PlotDomain()
        fig = build_figure(ready_view, domain)
        # One background rect plus one line per tick
        assert len(fig.layout.shapes) == 1 + len(domain.x_ticks) + len(domain.y_ticks)
        assert tuple(fig.layout.yaxis.range) == (domain.height, 0)


class TestExport:

    def test_save_html(self, ready_view, tmp_path):
        out = save_html(build_figure(ready_view), tmp_path / "plots" / "bl.html")
        assert out.exists()
        assert "plotly" in out.read_text()

    def test_save_compressed_html(self, ready_view, tmp_path):
        out = save_html(build_figure(ready_view), tmp_path / "bl.html", compress=True)
        assert out.name == "bl.html.gz"
        with gzip.open(out, 'rt', encoding='utf-8') as f:
            assert "<html>" in f.read()

    @pytest.mark.parametrize("view_name", ["ready_view", "empty_view"])
    def test_plot_curve_pdf(self, view_name, request, tmp_path):
        view = request.getfixturevalue(view_name)
        out = plot_curve(view, tmp_path / f"{view_name}.pdf")
        assert (tmp_path / f"{view_name}.pdf").stat().st_size > 0
        assert out.endswith(".pdf")
