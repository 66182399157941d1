"""
Plot-space mapping of selected curves.
"""

from .mapper import PlotDomain, PathCommand, PlotPath, MOVE, LINE, map_curve, visible_mask

__all__ = ['PlotDomain', 'PathCommand', 'PlotPath', 'MOVE', 'LINE', 'map_curve', 'visible_mask']
