"""
I/O module for the boundary-layer viewer.

Provides interactive (plotly) and static (matplotlib) renderings of a CurveView.
"""

from .figure import build_figure, save_html
from .plotting import plot_curve

__all__ = ['build_figure', 'save_html', 'plot_curve']
