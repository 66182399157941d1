"""
Dataset ingestion, parameter axes and curve selection.
"""

from .dataset import Record, ParseAnomaly, Dataset, parse_dataset, read_resource, load_dataset
from .axes import ParameterAxis, ParameterIndex, Selection, build_parameter_index
from .selection import Curve, matches, select_curve

__all__ = [
    'Record',
    'ParseAnomaly',
    'Dataset',
    'parse_dataset',
    'read_resource',
    'load_dataset',
    'ParameterAxis',
    'ParameterIndex',
    'Selection',
    'build_parameter_index',
    'Curve',
    'matches',
    'select_curve',
]
