"""
Curve selection: the rows of one (nu, U_inf) pair, ordered by x.
"""

import math
from typing import Optional, Tuple

from loguru import logger

from ..constants import EPSILON
from .axes import Selection
from .dataset import Dataset, Record

Curve = Tuple[Record, ...]


def matches(record: Record, selection: Selection, epsilon: float = EPSILON) -> bool:
    """True when the record belongs to the selected parameter pair."""
    return (abs(record.nu - selection.nu) < epsilon
            and abs(record.u_inf - selection.u_inf) < epsilon)


def select_curve(dataset: Dataset, selection: Optional[Selection],
                 epsilon: float = EPSILON) -> Curve:
    """
    Return the records matching ``selection``, sorted by x.
    
    Ties in x keep their source order; rows with a NaN x go last.
    An empty tuple means there is no curve for this pair; that is not an
    error.
    """
    if selection is None:
        return ()
    
    points = sorted(
        (r for r in dataset if matches(r, selection, epsilon)),
        key=lambda r: (math.isnan(r.x), r.x),
    )
    
    logger.debug(f"Filtering for nu={selection.nu:.4e}, u_inf={selection.u_inf:.4f}: {len(points)} points")
    if not points:
        logger.debug("No data found for selected parameters")
    
    return tuple(points)
