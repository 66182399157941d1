"""
Discrete parameter axes (nu, U_inf) used to drive the two sliders.
"""

import bisect
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Tuple

from loguru import logger

from ..constants import EPSILON
from ..errors import EmptyDatasetError
from .dataset import Dataset


class ParameterAxis:
    """Sorted, duplicate-free parameter values of one column.
    
    Values are deduplicated by exact float equality, so two entries that
    differ only by representation noise stay separate slider stops.
    """

    def __init__(self, values: Iterable[float]):
        self._values: Tuple[float, ...] = tuple(sorted(set(values)))

    @classmethod
    def from_column(cls, values: Iterable[float], name: str = "axis") -> 'ParameterAxis':
        """Build an axis, leaving out non-finite values."""
        values = list(values)
        finite = [v for v in values if math.isfinite(v)]
        dropped = len(values) - len(finite)
        if dropped:
            logger.warning(f"{name}: ignoring {dropped} non-finite value(s)")
        return cls(finite)

    @property
    def values(self) -> Tuple[float, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ParameterAxis):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ParameterAxis({list(self._values)!r})"

    def slider_range(self) -> Tuple[int, int]:
        """Index range ``(0, len - 1)`` of the slider bound to this axis."""
        return 0, len(self._values) - 1

    def index_of(self, value: float, epsilon: float = EPSILON) -> int:
        """Slider position of ``value``.
        
        Raises
        ------
        ValueError
            If no axis entry is within ``epsilon`` of ``value``.
        """
        i = bisect.bisect_left(self._values, value)
        for j in (i - 1, i):
            if 0 <= j < len(self._values) and abs(self._values[j] - value) < epsilon:
                return j
        raise ValueError(f"{value!r} is not on the axis")


class Selection(NamedTuple):
    """The active (nu, U_inf) pair, always taken from the axes."""
    nu: float
    u_inf: float

    @classmethod
    def from_indices(cls, index: 'ParameterIndex', nu_index: int, u_inf_index: int) -> 'Selection':
        """Snap slider positions to axis values."""
        for i, axis, name in ((nu_index, index.nu_axis, "nu"),
                              (u_inf_index, index.u_inf_axis, "u_inf")):
            if not 0 <= i < len(axis):
                raise IndexError(f"{name} index {i} outside slider range {axis.slider_range()}")
        return cls(index.nu_axis[nu_index], index.u_inf_axis[u_inf_index])


@dataclass(frozen=True)
class ParameterIndex:
    """Both slider domains derived from one Dataset."""
    nu_axis: ParameterAxis
    u_inf_axis: ParameterAxis

    def initial_selection(self) -> Selection:
        return Selection(self.nu_axis[0], self.u_inf_axis[0])

    def indices_of(self, selection: Selection) -> Tuple[int, int]:
        """Slider positions that reproduce ``selection``."""
        return self.nu_axis.index_of(selection.nu), self.u_inf_axis.index_of(selection.u_inf)


def build_parameter_index(dataset: Dataset) -> ParameterIndex:
    """
    Derive the nu and U_inf axes of a dataset.
    
    Raises
    ------
    EmptyDatasetError
        If the dataset has no rows, or no finite value for either parameter.
    """
    if dataset.is_empty:
        raise EmptyDatasetError(f"No data rows found in {dataset.source}")
    
    nu_axis = ParameterAxis.from_column((r.nu for r in dataset), name="nu")
    u_inf_axis = ParameterAxis.from_column((r.u_inf for r in dataset), name="u_inf")
    
    if len(nu_axis) == 0 or len(u_inf_axis) == 0:
        raise EmptyDatasetError(f"No finite (nu, u_inf) values found in {dataset.source}")
    
    logger.info(
        f"Data loaded: {len(dataset)} points, "
        f"{len(nu_axis)} unique nu, {len(u_inf_axis)} unique u_inf"
    )
    logger.debug(f"  sample nu:    {list(nu_axis[:5])}")
    logger.debug(f"  sample u_inf: {list(u_inf_axis[:5])}")
    
    return ParameterIndex(nu_axis=nu_axis, u_inf_axis=u_inf_axis)
