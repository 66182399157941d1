"""
Mapping of a selected curve onto the fixed plot canvas.

The physical domain [x_min, x_max] x [y_min, y_max] is mapped linearly onto
the plot area inside the canvas margins, with y pointing down as in SVG.
Points left of x_min are removed from the path altogether; when interior
points are removed the path restarts with a fresh "move" so that no line is
drawn across the gap.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .. import constants
from ..data.dataset import Record

NDArrayFloat = npt.NDArray[np.floating]

MOVE = "M"
LINE = "L"


@dataclass(frozen=True)
class PlotDomain:
    """Physical ranges and canvas geometry of the plot."""
    x_min: float = constants.X_MIN
    x_max: float = constants.X_MAX
    y_min: float = constants.Y_MIN
    y_max: float = constants.Y_MAX
    width: float = constants.CANVAS_WIDTH
    height: float = constants.CANVAS_HEIGHT
    margin_left: float = constants.MARGIN
    margin_right: float = constants.MARGIN
    margin_top: float = constants.MARGIN
    margin_bottom: float = constants.MARGIN
    x_ticks: Tuple[float, ...] = constants.X_TICKS
    y_ticks: Tuple[float, ...] = constants.Y_TICKS

    def __post_init__(self):
        if not self.x_max > self.x_min:
            raise ValueError(f"x_max ({self.x_max}) must exceed x_min ({self.x_min})")
        if not self.y_max > self.y_min:
            raise ValueError(f"y_max ({self.y_max}) must exceed y_min ({self.y_min})")
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ValueError("margins leave no room for the plot area")

    @property
    def plot_left(self) -> float:
        return self.margin_left

    @property
    def plot_right(self) -> float:
        return self.width - self.margin_right

    @property
    def plot_top(self) -> float:
        return self.margin_top

    @property
    def plot_bottom(self) -> float:
        return self.height - self.margin_bottom

    @property
    def plot_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def center(self) -> Tuple[float, float]:
        """Canvas center, where the no-data notice goes."""
        return self.width / 2, self.height / 2

    def x_to_pixel(self, x):
        """Map physical x (scalar or array) to canvas x."""
        return self.plot_left + (x - self.x_min) / (self.x_max - self.x_min) * self.plot_width

    def y_to_pixel(self, y):
        """Map physical y (scalar or array) to canvas y, increasing downwards."""
        return self.plot_bottom - (y - self.y_min) / (self.y_max - self.y_min) * self.plot_height


class PathCommand(NamedTuple):
    """One path vertex: ``op`` is MOVE (start a segment) or LINE."""
    op: str
    x: float
    y: float


@dataclass(frozen=True)
class PlotPath:
    """Ordered path in canvas coordinates."""
    commands: Tuple[PathCommand, ...]

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    @property
    def n_segments(self) -> int:
        return sum(1 for c in self.commands if c.op == MOVE)

    def to_svg_d(self, precision: int = 3) -> str:
        """SVG ``d`` attribute, e.g. ``"M 50.000 540.000 L 128.000 530.000"``."""
        return " ".join(f"{c.op} {c.x:.{precision}f} {c.y:.{precision}f}" for c in self.commands)

    def segments(self) -> List[NDArrayFloat]:
        """Split into polylines, one (n, 2) array per MOVE."""
        segments: List[List[Tuple[float, float]]] = []
        for c in self.commands:
            if c.op == MOVE or not segments:
                segments.append([])
            segments[-1].append((c.x, c.y))
        return [np.array(s, dtype=float) for s in segments]

    def to_xy(self, gap=None) -> Tuple[list, list]:
        """Flat x/y lists with ``gap`` between segments (plotly line breaks)."""
        xs: list = []
        ys: list = []
        for c in self.commands:
            if c.op == MOVE and xs:
                xs.append(gap)
                ys.append(gap)
            xs.append(c.x)
            ys.append(c.y)
        return xs, ys


def visible_mask(x: NDArrayFloat, y: NDArrayFloat, domain: PlotDomain) -> np.ndarray:
    """Points kept on the path: finite, and not left of x_min."""
    with np.errstate(invalid='ignore'):
        return np.isfinite(x) & np.isfinite(y) & (x >= domain.x_min)


def map_curve(curve: Sequence[Record], domain: PlotDomain = PlotDomain()) -> Optional[PlotPath]:
    """
    Map an x-sorted curve to a canvas path.

    Parameters
    ----------
    curve : sequence of Record
        Selected records, already sorted by x.
    domain : PlotDomain
        Physical ranges and canvas geometry.

    Returns
    -------
    PlotPath or None
        None when no point survives the x_min clip (nothing to render).
    """
    if len(curve) == 0:
        return None

    x = np.array([r.x for r in curve], dtype=float)
    y = np.array([r.delta99 for r in curve], dtype=float)

    keep = visible_mask(x, y, domain)
    if not np.any(keep):
        return None

    # A kept point starts a new segment unless its source predecessor was kept too
    prev_kept = np.concatenate(([False], keep[:-1]))
    px = domain.x_to_pixel(x)
    py = domain.y_to_pixel(y)

    commands = tuple(
        PathCommand(LINE if prev_kept[i] else MOVE, float(px[i]), float(py[i]))
        for i in np.flatnonzero(keep)
    )
    return PlotPath(commands)
