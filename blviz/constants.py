"""
Global constants for the boundary-layer viewer.

Plot-domain values describe the fixed canvas the curve is mapped onto.
They can be overridden from YAML at startup, never while a session runs.
"""

# Tolerance for matching parameter values after a text round trip
EPSILON = 1e-9

# Column order of the source table
COLUMNS = ("nu", "u_inf", "x", "re_x", "delta99")
N_COLUMNS = len(COLUMNS)

# Physical domain shown on the canvas
X_MIN = 0.5     # [m]
X_MAX = 5.0     # [m]
Y_MIN = 0.0     # [m]
Y_MAX = 0.40    # [m]

# Canvas in pixel units
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
MARGIN = 50     # Same on all sides, reserves room for tick labels

X_TICKS = (0.5, 1.0, 2.0, 3.0, 4.0, 5.0)
Y_TICKS = (0.0, 0.05, 0.10, 0.15, 0.20, 0.25, 0.30, 0.35, 0.40)

DEFAULT_DATASET = "data/blasius_40000_boundary_layers.csv"

# Shown when nothing inside the visible domain can be drawn
NO_DATA_MESSAGE = f"No data found for selected parameters below x={X_MIN}"
NOT_AVAILABLE = "N/A"
