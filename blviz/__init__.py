"""
Laminar flat-plate boundary-layer viewer.

Turns a precomputed ``nu,uInf,x,reX,delta99`` table into a selectable,
plottable delta_99(x) curve.
"""

__version__ = "0.1.0"
