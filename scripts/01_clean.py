"""
01_clean.py
~~~~~~~~~~~
Stage 01: load the raw rat sightings CSV, apply the cleaning rules, print the
summary tables and write the cleaned dataset next to the other outputs.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rat_sightings.config import CLEAN_FILENAME, DEFAULT_CONFIG_PATH, load_config, resolve_paths
from rat_sightings.data import load_and_clean_rat_data, summarize_data
from rat_sightings.utils.io import export_clean_data


def main() -> None:
    ap = argparse.ArgumentParser(description="Stage 01 – clean the raw rat sightings CSV.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    data_file, _ = resolve_paths(cfg)
    clean_name = cfg.get("data", {}).get("clean_file", CLEAN_FILENAME)

    df = load_and_clean_rat_data(data_file)
    summarize_data(df)
    # The standalone stage keeps the cleaned file beside the raw CSV; the full
    # pipeline writes its copy into the output directory.
    export_clean_data(df, data_file.parent / clean_name)


if __name__ == "__main__":
    main()
