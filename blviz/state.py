"""
Immutable viewer state and the recomputation pipeline.

A ViewState is a snapshot of everything the viewer knows: load status,
the dataset, its parameter axes and the active selection. Moving a slider
produces a new snapshot; ``recompute`` is a pure function of a snapshot.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union
from pathlib import Path

from loguru import logger

from .constants import EPSILON, NO_DATA_MESSAGE
from .data.axes import ParameterIndex, Selection, build_parameter_index
from .data.dataset import Dataset, load_dataset
from .data.selection import Curve, select_curve
from .errors import EmptyDatasetError, LoadError
from .physics.metrics import format_nu, format_reynolds, format_u_inf, reynolds_number
from .plot.mapper import PlotDomain, PlotPath, map_curve


class LoadStatus(Enum):
    """Lifecycle of the single dataset load."""
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"    # Resource read fine but holds no rows
    ERROR = "error"    # Resource could not be read


@dataclass(frozen=True)
class CurveView:
    """Everything the presentation layer draws for one selection."""
    selection: Optional[Selection]
    curve: Curve
    path: Optional[PlotPath]
    reynolds: Optional[float]

    @property
    def is_renderable(self) -> bool:
        return self.path is not None

    @property
    def notice(self) -> Optional[str]:
        """Centered message replacing the curve, or None when there is a path."""
        return None if self.is_renderable else NO_DATA_MESSAGE

    def labels(self) -> Dict[str, str]:
        """Display strings for the control panel."""
        if self.selection is None:
            return {'reynolds': format_reynolds(None)}
        return {
            'nu': format_nu(self.selection.nu),
            'u_inf': format_u_inf(self.selection.u_inf),
            'reynolds': format_reynolds(self.reynolds),
        }


@dataclass(frozen=True)
class ViewState:
    """Snapshot of the viewer; replaced, never edited."""
    status: LoadStatus = LoadStatus.LOADING
    dataset: Optional[Dataset] = None
    index: Optional[ParameterIndex] = None
    selection: Optional[Selection] = None
    message: Optional[str] = None
    epsilon: float = EPSILON

    @classmethod
    def from_dataset(cls, dataset: Dataset, epsilon: float = EPSILON) -> 'ViewState':
        """Ready state with the first value of each axis selected."""
        try:
            index = build_parameter_index(dataset)
        except EmptyDatasetError as e:
            logger.error(str(e))
            return cls(status=LoadStatus.EMPTY, dataset=dataset, message=str(e), epsilon=epsilon)
        return cls(
            status=LoadStatus.READY,
            dataset=dataset,
            index=index,
            selection=index.initial_selection(),
            epsilon=epsilon,
        )

    @classmethod
    def load(cls, source: Union[str, Path], timeout: float = 30.0,
             epsilon: float = EPSILON) -> 'ViewState':
        """Run the one-time load. Failures give a terminal ERROR state."""
        try:
            dataset = load_dataset(source, timeout=timeout)
        except LoadError as e:
            logger.error(str(e))
            return cls(status=LoadStatus.ERROR, message=str(e), epsilon=epsilon)
        return cls.from_dataset(dataset, epsilon=epsilon)

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY

    @property
    def slider_indices(self) -> Optional[Tuple[int, int]]:
        """Current (nu, u_inf) slider positions."""
        if not self.is_ready:
            return None
        return self.index.indices_of(self.selection)

    def with_indices(self, nu_index: Optional[int] = None,
                     u_inf_index: Optional[int] = None) -> 'ViewState':
        """New snapshot after one or both sliders moved."""
        if not self.is_ready:
            raise RuntimeError(f"Cannot select parameters while {self.status.value}")
        cur_nu, cur_u = self.slider_indices
        selection = Selection.from_indices(
            self.index,
            cur_nu if nu_index is None else nu_index,
            cur_u if u_inf_index is None else u_inf_index,
        )
        return replace(self, selection=selection)

    def recompute(self, domain: PlotDomain = PlotDomain()) -> CurveView:
        """Curve, path and Reynolds number for the committed selection."""
        if not self.is_ready:
            return CurveView(selection=None, curve=(), path=None, reynolds=None)
        curve = select_curve(self.dataset, self.selection, self.epsilon)
        return CurveView(
            selection=self.selection,
            curve=curve,
            path=map_curve(curve, domain),
            reynolds=reynolds_number(curve, self.selection),
        )
