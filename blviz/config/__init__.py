"""
Configuration module for the boundary-layer viewer.

Provides YAML-based configuration with dataclass schema.
"""

from .schema import (
    ViewerConfig,
    DataConfig,
    PlotConfig,
    OutputConfig,
    LoggingConfig,
)

from .loader import (
    load_yaml,
    from_dict,
    apply_cli_overrides,
    save_yaml,
)

__all__ = [
    # Schema classes
    'ViewerConfig',
    'DataConfig',
    'PlotConfig',
    'OutputConfig',
    'LoggingConfig',
    # Loader functions
    'load_yaml',
    'from_dict',
    'apply_cli_overrides',
    'save_yaml',
]
