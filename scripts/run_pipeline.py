#!/usr/bin/env python3
"""
run_pipeline.py
~~~~~~~~~~~~~~~
Runs the whole rat sightings analysis in one process:

load + clean → summary statistics → charts → CSV exports → final report

With no flags it reads ``config.yaml`` from the working directory, which points
at ``data/Rat_Sightings.csv`` and writes to ``output/``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rat_sightings.config import CLEAN_FILENAME, DEFAULT_CONFIG_PATH, load_config, resolve_paths
from rat_sightings.pipeline import run_analysis


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the full NYC rat sightings analysis.")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--data-file", default=None, help="Override the raw CSV path.")
    parser.add_argument("--output-dir", default=None, help="Override the output directory.")
    args = parser.parse_args()

    cfg = load_config(args.config)
    data_file, output_dir = resolve_paths(cfg)
    if args.data_file:
        data_file = Path(args.data_file)
    if args.output_dir:
        output_dir = Path(args.output_dir)

    run_analysis(
        data_file=data_file,
        output_dir=output_dir,
        clean_filename=cfg.get("data", {}).get("clean_file", CLEAN_FILENAME),
        plot_cfg=cfg.get("plots"),
    )


if __name__ == "__main__":
    main()
