"""
Quantities derived from the selected curve, and their display strings.
"""

import math
from typing import Optional, Sequence

from ..constants import NOT_AVAILABLE
from ..data.axes import Selection
from ..data.dataset import Record


def reynolds_number(curve: Sequence[Record], selection: Optional[Selection]) -> Optional[float]:
    """
    Local Reynolds number Re_x = U_inf * x / nu at the end of the curve.
    
    x is taken from the last point of the x-sorted curve (its largest x) and
    the stored re_x column is not used. Points whose x is NaN sort last and
    are skipped here.
    
    Returns
    -------
    float or None
        None when there is no selection, no usable point, or nu is zero.
    """
    if selection is None or selection.nu == 0:
        return None
    
    for record in reversed(curve):
        if math.isfinite(record.x):
            return selection.u_inf * record.x / selection.nu
    return None


def format_nu(nu: float) -> str:
    return f"{nu:.4e} m²/s"


def format_u_inf(u_inf: float) -> str:
    return f"{u_inf:.4f} m/s"


def format_reynolds(re: Optional[float]) -> str:
    """Scientific notation, or N/A when Re is undefined (never shown as 0)."""
    if re is None:
        return NOT_AVAILABLE
    return f"{re:.2e}"
