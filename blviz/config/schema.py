"""
Configuration schema for the boundary-layer viewer.

Dataclass-based configuration that can be loaded from YAML or constructed programmatically.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any

from .. import constants


@dataclass
class DataConfig:
    """Dataset source and matching tolerance."""
    
    source: str = constants.DEFAULT_DATASET   # Local path or http(s) URL
    epsilon: float = constants.EPSILON        # Parameter matching tolerance
    timeout: float = 30.0                     # Seconds, URL sources only


@dataclass
class PlotConfig:
    """Physical domain and canvas the curve is mapped onto."""
    
    x_min: float = constants.X_MIN
    x_max: float = constants.X_MAX
    y_min: float = constants.Y_MIN
    y_max: float = constants.Y_MAX
    width: int = constants.CANVAS_WIDTH
    height: int = constants.CANVAS_HEIGHT
    margin_left: int = constants.MARGIN
    margin_right: int = constants.MARGIN
    margin_top: int = constants.MARGIN
    margin_bottom: int = constants.MARGIN
    x_ticks: List[float] = field(default_factory=lambda: list(constants.X_TICKS))
    y_ticks: List[float] = field(default_factory=lambda: list(constants.Y_TICKS))
    
    def to_domain(self):
        """Build the PlotDomain used by the mapper."""
        from ..plot.mapper import PlotDomain
        return PlotDomain(
            x_min=self.x_min, x_max=self.x_max,
            y_min=self.y_min, y_max=self.y_max,
            width=self.width, height=self.height,
            margin_left=self.margin_left, margin_right=self.margin_right,
            margin_top=self.margin_top, margin_bottom=self.margin_bottom,
            x_ticks=tuple(self.x_ticks), y_ticks=tuple(self.y_ticks),
        )


@dataclass
class OutputConfig:
    """Output configuration."""
    
    directory: str = "output/viewer"
    case_name: str = "boundary_layer"
    html: bool = True
    pdf: bool = False
    use_cdn: bool = True
    compress: bool = False


@dataclass
class LoggingConfig:
    """loguru handler settings."""
    
    level: str = "INFO"
    show_time: bool = True


@dataclass
class ViewerConfig:
    """Complete viewer configuration."""
    
    data: DataConfig = field(default_factory=DataConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary."""
        return asdict(self)
