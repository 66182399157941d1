"""
YAML configuration loader with validation.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Union
from dataclasses import fields, is_dataclass

from .schema import (
    ViewerConfig, DataConfig, PlotConfig, OutputConfig, LoggingConfig,
)


def _coerce_type(value, field_type):
    """Coerce value to the expected field type."""
    # Handle string representations of numbers (e.g., "1e-9")
    if field_type == float and isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    if field_type == int and isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return value
    if field_type == bool and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('true', 'yes', '1', 'on'):
            return True
        if lowered in ('false', 'no', '0', 'off'):
            return False
    return value


def _dict_to_dataclass(cls, data: dict):
    """Convert a nested dictionary to a dataclass instance."""
    if not is_dataclass(cls):
        return data
    
    field_types = {f.name: f.type for f in fields(cls)}
    kwargs = {}
    
    for key, value in data.items():
        if key not in field_types:
            continue  # Skip unknown fields
        
        field_type = field_types[key]
        
        if is_dataclass(field_type) and isinstance(value, dict):
            kwargs[key] = _dict_to_dataclass(field_type, value)
        elif isinstance(value, (list, tuple)):
            kwargs[key] = [_coerce_type(v, float) for v in value]
        else:
            kwargs[key] = _coerce_type(value, field_type)
    
    return cls(**kwargs)


def load_yaml(path: Union[str, Path]) -> ViewerConfig:
    """
    Load viewer configuration from a YAML file.
    
    Args:
        path: Path to YAML configuration file
        
    Returns:
        ViewerConfig instance
        
    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    
    with open(path) as f:
        data = yaml.safe_load(f)
    
    if data is None:
        data = {}
    
    return from_dict(data)


def from_dict(data: Dict[str, Any]) -> ViewerConfig:
    """
    Create ViewerConfig from a dictionary.
    
    Missing sections and keys fall back to defaults.
    """
    sections = {
        'data': DataConfig,
        'plot': PlotConfig,
        'output': OutputConfig,
        'logging': LoggingConfig,
    }
    
    config_dict = {}
    for name, cls in sections.items():
        if name in data and isinstance(data[name], dict):
            config_dict[name] = _dict_to_dataclass(cls, data[name])
    
    config = ViewerConfig(**config_dict)
    _validate(config)
    return config


def _validate(config: ViewerConfig) -> None:
    """Reject plot domains the mapper cannot divide by."""
    plot = config.plot
    if not plot.x_max > plot.x_min:
        raise ValueError(f"plot.x_max ({plot.x_max}) must exceed plot.x_min ({plot.x_min})")
    if not plot.y_max > plot.y_min:
        raise ValueError(f"plot.y_max ({plot.y_max}) must exceed plot.y_min ({plot.y_min})")
    if plot.width <= plot.margin_left + plot.margin_right:
        raise ValueError("plot.width must leave room between the left and right margins")
    if plot.height <= plot.margin_top + plot.margin_bottom:
        raise ValueError("plot.height must leave room between the top and bottom margins")
    if config.data.epsilon <= 0:
        raise ValueError(f"data.epsilon must be positive, got {config.data.epsilon}")


def apply_cli_overrides(config: ViewerConfig, args) -> ViewerConfig:
    """
    Apply command-line argument overrides to a configuration.
    
    Only overrides values that were explicitly set (not None).
    
    Args:
        config: Base configuration
        args: argparse.Namespace with CLI arguments
        
    Returns:
        Updated ViewerConfig
    """
    config_dict = config.to_dict()
    
    cli_mapping = {
        # Data
        'source': ('data', 'source'),
        'epsilon': ('data', 'epsilon'),
        'timeout': ('data', 'timeout'),
        
        # Output
        'output_dir': ('output', 'directory'),
        'case_name': ('output', 'case_name'),
        'html': ('output', 'html'),
        'pdf': ('output', 'pdf'),
        'compress': ('output', 'compress'),
        
        # Logging
        'log_level': ('logging', 'level'),
    }
    
    for cli_name, config_path in cli_mapping.items():
        if hasattr(args, cli_name):
            value = getattr(args, cli_name)
            if value is not None:
                target = config_dict
                for key in config_path[:-1]:
                    target = target[key]
                target[config_path[-1]] = value
    
    return from_dict(config_dict)


def save_yaml(config: ViewerConfig, path: Union[str, Path]) -> None:
    """Save configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
