"""
Boundary-layer physics: derived metrics and the Blasius table generator.
"""

from .metrics import reynolds_number, format_nu, format_u_inf, format_reynolds

__all__ = ['reynolds_number', 'format_nu', 'format_u_inf', 'format_reynolds']
