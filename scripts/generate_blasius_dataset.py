#!/usr/bin/env python3
"""
Generate the precomputed delta_99 table read by the viewer.

Defaults give 20 x 20 x 100 = 40000 rows.

Usage:
    python generate_blasius_dataset.py
    python generate_blasius_dataset.py -o data/small.csv --n-nu 3 --n-u 3 --n-x 20
"""

import sys
import argparse
from pathlib import Path

import numpy as np

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from blviz.constants import DEFAULT_DATASET
from blviz.physics.blasius import Blasius, generate_dataset
from blviz.utils.logging import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tabulate Blasius delta_99(x) over a (nu, U_inf) grid")
    parser.add_argument("-o", "--output", type=str, default=str(project_root / DEFAULT_DATASET))
    parser.add_argument("--nu-min", type=float, default=1.0e-6)
    parser.add_argument("--nu-max", type=float, default=2.0e-5)
    parser.add_argument("--n-nu", type=int, default=20)
    parser.add_argument("--u-min", type=float, default=1.0)
    parser.add_argument("--u-max", type=float, default=20.0)
    parser.add_argument("--n-u", type=int, default=20)
    parser.add_argument("--x-min", type=float, default=0.05)
    parser.add_argument("--x-max", type=float, default=5.0)
    parser.add_argument("--n-x", type=int, default=100)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging("INFO", show_time=False)
    
    nu_values = np.linspace(args.nu_min, args.nu_max, args.n_nu)
    u_values = np.linspace(args.u_min, args.u_max, args.n_u)
    x_values = np.linspace(args.x_min, args.x_max, args.n_x)
    
    text = generate_dataset(nu_values, u_values, x_values, solution=Blasius())
    
    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text)
    logger.info(f"Saved: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
