from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import pandas as pd

from ..config import DEFAULT_CLEAN_FILE, DEFAULT_OUTPUT_DIR
from ..data.preprocess import load_raw_data
from ..data.scan import count_by

BOROUGH_YEAR_FILENAME = "summary_borough_year.csv"
LOCATION_TYPE_FILENAME = "summary_location_type.csv"


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def export_clean_data(
    df: pd.DataFrame,
    output_path: str | os.PathLike = DEFAULT_CLEAN_FILE,
) -> Path:
    out = Path(output_path)
    print(f"Exporting cleaned data to: {out}")
    ensure_dirs(out.parent)
    df.to_csv(out, index=False)
    print("Export complete!")
    return out


def summarize_by_borough_year(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, ["Borough", "sighting_year"], name="total_sightings")


def summarize_by_location_type(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, "Location Type", sort=True, name="total_sightings")


def export_summaries(
    df: pd.DataFrame, output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR
) -> Dict[str, Path]:
    out_dir = Path(output_dir)
    ensure_dirs(out_dir)

    borough_year = out_dir / BOROUGH_YEAR_FILENAME
    summarize_by_borough_year(df).to_csv(borough_year, index=False)
    print(f"Summary statistics exported to: {borough_year}")

    location = out_dir / LOCATION_TYPE_FILENAME
    summarize_by_location_type(df).to_csv(location, index=False)
    print(f"Location summary exported to: {location}")

    return {"borough_year": borough_year, "location_type": location}


def load_clean_dataset(path: str | os.PathLike = DEFAULT_CLEAN_FILE) -> pd.DataFrame:
    """Reload an exported cleaned CSV with the raw-data loader's column rules."""
    return load_raw_data(path)


__all__ = [
    "ensure_dirs",
    "export_clean_data",
    "summarize_by_borough_year",
    "summarize_by_location_type",
    "export_summaries",
    "load_clean_dataset",
]
