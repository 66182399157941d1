#!/usr/bin/env python3
"""
Boundary-layer curve export.

Loads a precomputed delta_99 table, selects one (nu, U_inf) pair by slider
index, reports the derived Reynolds number and writes the plot.

Usage:
    python plot_boundary_layer.py data/blasius_40000_boundary_layers.csv
    python plot_boundary_layer.py data.csv --nu-index 3 --u-inf-index 7 --pdf
    python plot_boundary_layer.py --config viewer.yaml --list
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from blviz.config import ViewerConfig, load_yaml, apply_cli_overrides
from blviz.io.figure import build_figure, save_html
from blviz.io.plotting import plot_curve
from blviz.state import ViewState
from blviz.utils.logging import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot delta_99(x) for one (nu, U_inf) pair of a precomputed table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", nargs="?", default=None,
                        help="Dataset path or http(s) URL (overrides config)")
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--nu-index", type=int, default=0, help="Position on the nu slider")
    parser.add_argument("--u-inf-index", type=int, default=0, help="Position on the U_inf slider")
    parser.add_argument("--list", action="store_true", help="Print both parameter axes and exit")
    parser.add_argument("--epsilon", type=float, default=None, help="Parameter matching tolerance")
    parser.add_argument("--output-dir", type=str, default=None)
    parser.add_argument("--case-name", type=str, default=None)
    parser.add_argument("--html", action=argparse.BooleanOptionalAction, default=None,
                        help="Write interactive HTML")
    parser.add_argument("--pdf", action=argparse.BooleanOptionalAction, default=None,
                        help="Write static PDF")
    parser.add_argument("--compress", action=argparse.BooleanOptionalAction, default=None,
                        help="Gzip the HTML output")
    parser.add_argument("--log-level", type=str, default=None)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    
    config = load_yaml(args.config) if args.config else ViewerConfig()
    config = apply_cli_overrides(config, args)
    setup_logging(config.logging.level, config.logging.show_time)
    
    state = ViewState.load(config.data.source, timeout=config.data.timeout,
                           epsilon=config.data.epsilon)
    if not state.is_ready:
        logger.error(f"Dataset unusable ({state.status.value}): {state.message}")
        return 1
    
    if args.list:
        for name, axis in (("nu", state.index.nu_axis), ("u_inf", state.index.u_inf_axis)):
            print(f"{name} ({len(axis)} values):")
            for i, value in enumerate(axis):
                print(f"  [{i:3d}] {value!r}")
        return 0
    
    try:
        state = state.with_indices(nu_index=args.nu_index, u_inf_index=args.u_inf_index)
    except IndexError as e:
        logger.error(str(e))
        return 2
    
    domain = config.plot.to_domain()
    view = state.recompute(domain)
    labels = view.labels()
    
    print(f"  nu:        {labels['nu']}")
    print(f"  U_inf:     {labels['u_inf']}")
    print(f"  points:    {len(view.curve)}")
    print(f"  segments:  {view.path.n_segments if view.is_renderable else 0}")
    print(f"  Re:        {labels['reynolds']}")
    if not view.is_renderable:
        logger.warning(view.notice)
    
    out_dir = Path(config.output.directory)
    base = out_dir / f"{config.output.case_name}_nu{args.nu_index}_u{args.u_inf_index}"
    if config.output.html:
        save_html(build_figure(view, domain), base.with_suffix(".html"),
                  use_cdn=config.output.use_cdn, compress=config.output.compress)
    if config.output.pdf:
        out_path = plot_curve(view, base.with_suffix(".pdf"), domain)
        logger.info(f"Saved: {out_path}")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
