"""
Plotly rendering of a CurveView on the fixed canvas.

The figure works directly in canvas units: the path from the mapper is drawn
as-is, and grid lines and tick labels are placed with the same PlotDomain.
"""

import gzip
from pathlib import Path
from typing import Any, Union

import plotly.graph_objects as go
from loguru import logger

from ..plot.mapper import PlotDomain
from ..state import CurveView

# Dracula palette
BACKGROUND = "#21222c"
PLOT_AREA = "#44475a"
GRID = "#6272a4"
FOREGROUND = "#f8f8f2"
CURVE = "#ff79c6"
NOTICE = "#ff5555"


def _add_grid(fig: go.Figure, domain: PlotDomain) -> None:
    """Grid lines and tick labels for both axes."""
    for x in domain.x_ticks:
        px = domain.x_to_pixel(x)
        fig.add_shape(type="line", x0=px, x1=px, y0=domain.plot_top, y1=domain.plot_bottom,
                      line=dict(color=GRID, width=1), layer="below")
        fig.add_annotation(x=px, y=domain.plot_bottom + 20, text=f"{x:g}", showarrow=False,
                           font=dict(color=FOREGROUND, size=11))
    
    for y in domain.y_ticks:
        py = domain.y_to_pixel(y)
        fig.add_shape(type="line", x0=domain.plot_left, x1=domain.plot_right, y0=py, y1=py,
                      line=dict(color=GRID, width=1), layer="below")
        fig.add_annotation(x=domain.plot_left - 5, y=py, text=f"{y:.2f}", showarrow=False,
                           xanchor="right", font=dict(color=FOREGROUND, size=11))
    
    fig.add_annotation(x=domain.width / 2, y=domain.height - 10, text="x (m)", showarrow=False,
                       font=dict(color=FOREGROUND, size=13))
    fig.add_annotation(x=20, y=domain.height / 2, text="δ (m)", showarrow=False, textangle=-90,
                       font=dict(color=FOREGROUND, size=13))


def build_figure(view: CurveView, domain: PlotDomain = PlotDomain(),
                 title: str = "Boundary Layer Profile") -> go.Figure:
    """
    Build the interactive figure for one selection.
    
    Parameters
    ----------
    view : CurveView
        Output of ViewState.recompute().
    domain : PlotDomain
        Must be the domain the path was mapped with.
    title : str
        Figure title; the current labels are appended.
        
    Returns
    -------
    go.Figure
        One line trace with breaks between path segments, or a centered
        notice when nothing can be drawn.
    """
    fig = go.Figure()
    
    fig.add_shape(type="rect", x0=0, x1=domain.width, y0=0, y1=domain.plot_bottom,
                  fillcolor=PLOT_AREA, line=dict(width=0), layer="below")
    _add_grid(fig, domain)
    
    if view.is_renderable:
        xs, ys = view.path.to_xy(gap=None)
        fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", connectgaps=False,
            line=dict(color=CURVE, width=2),
            name="δ99", hoverinfo="skip",
        ))
    else:
        cx, cy = domain.center
        fig.add_annotation(x=cx, y=cy, text=view.notice, showarrow=False,
                           font=dict(color=NOTICE, size=16))
    
    labels = view.labels()
    subtitle = "  |  ".join(
        f"{name} = {labels[key]}" for key, name in (("nu", "ν"), ("u_inf", "U∞"), ("reynolds", "Re"))
        if key in labels
    )
    
    fig.update_layout(
        title=dict(text=f"{title}<br><sup>{subtitle}</sup>", font=dict(color=FOREGROUND)),
        width=domain.width, height=domain.height + 80,
        paper_bgcolor=BACKGROUND, plot_bgcolor=BACKGROUND,
        showlegend=False,
        margin=dict(l=0, r=0, t=80, b=0),
        xaxis=dict(range=[0, domain.width], visible=False, fixedrange=True),
        yaxis=dict(range=[domain.height, 0], visible=False, fixedrange=True,
                   scaleanchor="x", scaleratio=1),
    )
    return fig


def save_html(fig: go.Figure, filename: Union[str, Path], use_cdn: bool = True,
              compress: bool = False) -> Path:
    """Write HTML file with optional compression."""
    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    include_plotlyjs: Any = 'cdn' if use_cdn else True
    
    if compress:
        html_str = fig.to_html(include_plotlyjs=include_plotlyjs)
        gz_path = output_path.with_suffix('.html.gz')
        with gzip.open(str(gz_path), 'wt', encoding='utf-8', compresslevel=9) as f:
            f.write(html_str)
        
        uncompressed_size = len(html_str.encode('utf-8'))
        compressed_size = gz_path.stat().st_size
        ratio = uncompressed_size / compressed_size if compressed_size > 0 else 1
        logger.info(f"Saved compressed HTML to: {gz_path} ({compressed_size / 1e3:.1f} kB, {ratio:.1f}x compression)")
        return gz_path
    
    fig.write_html(str(output_path), include_plotlyjs=include_plotlyjs)
    logger.info(f"Saved HTML to: {output_path}")
    if use_cdn:
        logger.info("Note: viewing requires internet connection (using plotly.js CDN)")
    return output_path
