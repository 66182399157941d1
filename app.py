"""
Boundary Layer Viewer
Streamlit entry point: two index sliders driving the delta_99(x) plot.

Usage:
    streamlit run app.py
    streamlit run app.py -- --config viewer.yaml
    streamlit run app.py -- --source https://example.org/blasius.csv
"""

import argparse
import sys
from pathlib import Path

import streamlit as st

# Add project root to path (for direct execution)
# If installed as package, this is not needed
project_root = Path(__file__).parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from loguru import logger

from blviz.config import ViewerConfig, load_yaml, apply_cli_overrides
from blviz.io.figure import build_figure
from blviz.state import LoadStatus, ViewState
from blviz.utils.logging import setup_logging


def parse_args(argv):
    parser = argparse.ArgumentParser(description="Interactive boundary-layer viewer")
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--source", type=str, default=None, help="Dataset path or URL")
    parser.add_argument("--log-level", dest="log_level", type=str, default=None)
    args, _ = parser.parse_known_args(argv)
    return args


@st.cache_resource(show_spinner=False)
def get_config(argv: tuple) -> ViewerConfig:
    args = parse_args(list(argv))
    config = load_yaml(args.config) if args.config else ViewerConfig()
    config = apply_cli_overrides(config, args)
    setup_logging(config.logging.level, config.logging.show_time)
    return config


@st.cache_resource(show_spinner=False)
def load_state(source: str, timeout: float, epsilon: float) -> ViewState:
    """One load per source for the whole server; failures stay terminal."""
    return ViewState.load(source, timeout=timeout, epsilon=epsilon)


def index_slider(label, axis, start, key):
    """Slider over axis positions; a single-value axis has nothing to slide."""
    lo, hi = axis.slider_range()
    if hi == lo:
        st.caption(f"{label}: single value in dataset")
        return lo
    return st.slider(label, lo, hi, start, step=1, key=key)


st.set_page_config(page_title="Boundary Layer Analysis", layout="wide")

config = get_config(tuple(sys.argv[1:]))
domain = config.plot.to_domain()

with st.spinner("Loading data..."):
    state = load_state(config.data.source, config.data.timeout, config.data.epsilon)

plot_col, control_col = st.columns([2, 1])

with control_col:
    st.subheader("Simulation Controls")
    if state.is_ready:
        nu_axis = state.index.nu_axis
        u_axis = state.index.u_inf_axis
        nu_start, u_start = state.slider_indices
        nu_i = index_slider("Kinematic Viscosity (ν)", nu_axis, nu_start, key="nu_index")
        u_i = index_slider("Free Stream Velocity (U∞)", u_axis, u_start, key="u_inf_index")
        state = state.with_indices(nu_index=nu_i, u_inf_index=u_i)

view = state.recompute(domain)

with plot_col:
    st.subheader("Boundary Layer Profile")
    if state.status is LoadStatus.ERROR:
        st.error(state.message)
    elif state.status is LoadStatus.EMPTY:
        st.warning(f"No data available: {state.message}")
    else:
        st.plotly_chart(build_figure(view, domain), use_container_width=True)

if state.is_ready:
    labels = view.labels()
    with control_col:
        st.markdown(f"Current ν: **{labels['nu']}**")
        st.markdown(f"Current U∞: **{labels['u_inf']}**")
        st.divider()
        st.markdown(f"Reynolds Number (Re): **{labels['reynolds']}**")
        if state.dataset.anomalies:
            st.caption(f"{len(state.dataset.anomalies)} non-finite or unparseable field(s) in the dataset were kept as NaN")
    logger.debug(f"Rendered nu_index={state.slider_indices[0]}, u_inf_index={state.slider_indices[1]}")
