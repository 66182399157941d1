"""
Shared pytest fixtures for the test suite.

Small hand-written tables exercise the parsing, selection and mapping
edge cases; the Blasius solution is solved once per session.
"""

import sys
from pathlib import Path

import pytest

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blviz.data.dataset import parse_dataset
from blviz.data.axes import build_parameter_index


# =============================================================================
# Dataset texts
# =============================================================================

# Two nu values, one U_inf; the reX column is left blank
SCENARIO_TEXT = "h\n1e-5,10,0.5,,0.01\n1e-5,10,1.0,,0.02\n2e-5,10,0.5,,0.015"

# Rows out of x order, interior points left of x_min, trailing blank lines
CLIPPED_TEXT = """nu,uInf,x,reX,delta99
1e-5,5,2.0,1e6,0.03
1e-5,5,0.2,2e5,0.01
1e-5,5,0.6,3e5,0.015
1e-5,5,1.0,5e5,0.02
1e-5,5,0.4,2e5,0.012
2e-5,5,0.1,2.5e4,0.005
2e-5,5,0.3,7.5e4,0.008

"""

MALFORMED_TEXT = """nu,uInf,x,reX,delta99
1e-5,10,0.5,5e5,0.01
abc,10,1.0,1e6,0.02
1e-5,10,oops,1e6,0.02
1e-5,10,2.0
"""


@pytest.fixture
def scenario_dataset():
    return parse_dataset(SCENARIO_TEXT)


@pytest.fixture
def scenario_index(scenario_dataset):
    return build_parameter_index(scenario_dataset)


@pytest.fixture
def clipped_dataset():
    return parse_dataset(CLIPPED_TEXT)


@pytest.fixture
def malformed_dataset():
    return parse_dataset(MALFORMED_TEXT)


@pytest.fixture
def scenario_csv(tmp_path):
    """Scenario table written to disk."""
    path = tmp_path / "scenario.csv"
    path.write_text(SCENARIO_TEXT)
    return path


@pytest.fixture(scope="session")
def blasius_solution():
    """
    Numerical Blasius profile.
    
    Session-scoped: solved once, shared across all tests.
    """
    from blviz.physics.blasius import Blasius
    return Blasius()
