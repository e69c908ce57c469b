"""
02_visualize.py
~~~~~~~~~~~~~~~
Stage 02: render the borough trend, location-type composition and seasonal
charts (PNG + PDF each) into the configured output directory.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rat_sightings.config import DEFAULT_CONFIG_PATH, load_config, resolve_paths
from rat_sightings.data import load_and_clean_rat_data
from rat_sightings.viz import generate_all_plots


def main() -> None:
    ap = argparse.ArgumentParser(description="Stage 02 – render the rat sightings charts.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    data_file, output_dir = resolve_paths(cfg)
    # Charts need the ordered month/weekday categoricals, so clean from raw
    # rather than reloading the exported CSV.
    df = load_and_clean_rat_data(data_file)
    generate_all_plots(df, output_dir=output_dir, plot_cfg=cfg.get("plots"))


if __name__ == "__main__":
    main()
