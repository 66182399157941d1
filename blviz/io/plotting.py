"""
Static (PDF/PNG) rendering of a CurveView.
"""

from pathlib import Path
from typing import Union

from ..plot.mapper import PlotDomain
from ..state import CurveView
from . import figure as style

# Lazy import matplotlib to avoid issues when not installed
_plt = None


def _ensure_matplotlib():
    """Ensure matplotlib is available and configured."""
    global _plt
    if _plt is None:
        import matplotlib
        matplotlib.use('Agg')  # Non-interactive backend
        import matplotlib.pyplot as plt
        _plt = plt
    return _plt


def plot_curve(view: CurveView, output_path: Union[str, Path],
               domain: PlotDomain = PlotDomain()) -> str:
    """
    Save the curve of one selection as a static image.
    
    The image is drawn in canvas units, so it matches the interactive
    figure. The format follows the file suffix (.pdf, .png, .svg).
    
    Returns
    -------
    output_path : str
        Path to saved file.
    """
    plt = _ensure_matplotlib()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    
    fig, ax = plt.subplots(figsize=(domain.width / 100, domain.height / 100))
    fig.patch.set_facecolor(style.BACKGROUND)
    ax.set_facecolor(style.PLOT_AREA)
    
    ax.set_xlim(domain.plot_left, domain.plot_right)
    ax.set_ylim(domain.plot_bottom, domain.plot_top)  # Canvas y points down
    ax.set_xticks([domain.x_to_pixel(x) for x in domain.x_ticks])
    ax.set_xticklabels([f"{x:g}" for x in domain.x_ticks])
    ax.set_yticks([domain.y_to_pixel(y) for y in domain.y_ticks])
    ax.set_yticklabels([f"{y:.2f}" for y in domain.y_ticks])
    ax.grid(True, color=style.GRID, linewidth=0.5)
    ax.tick_params(colors=style.FOREGROUND)
    ax.set_xlabel("x (m)", color=style.FOREGROUND)
    ax.set_ylabel("δ (m)", color=style.FOREGROUND)
    
    if view.is_renderable:
        for seg in view.path.segments():
            ax.plot(seg[:, 0], seg[:, 1], color=style.CURVE, linewidth=2)
    else:
        cx, cy = domain.center
        ax.text(cx, cy, view.notice, color=style.NOTICE, ha='center', va='center', fontsize=12)
    
    labels = view.labels()
    title = f"Re = {labels['reynolds']}"
    if 'nu' in labels:
        title = f"ν = {labels['nu']}, U∞ = {labels['u_inf']}, " + title
    ax.set_title(title, color=style.FOREGROUND, fontsize=10)
    
    fig.tight_layout()
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    
    return str(output_path)
