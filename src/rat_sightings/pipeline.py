from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from .config import CLEAN_FILENAME, DEFAULT_DATA_FILE, DEFAULT_OUTPUT_DIR
from .data.preprocess import load_and_clean_rat_data
from .data.scan import peak_month, summarize_data, top_borough, top_location_types
from .utils.io import ensure_dirs, export_clean_data, export_summaries
from .viz.plots import generate_all_plots

RULE = "-" * 43
BANNER = "=" * 44


@dataclass
class KeyFindings:
    total: int
    first_date: Optional[pd.Timestamp]
    last_date: Optional[pd.Timestamp]
    top_borough: Optional[str]
    top_borough_count: int
    peak_month: Optional[str]
    top_location: Optional[str]


@dataclass
class PipelineResult:
    data: pd.DataFrame
    findings: KeyFindings
    clean_path: Path
    summary_paths: Dict[str, Path] = field(default_factory=dict)
    figures: Dict[str, object] = field(default_factory=dict)


def _first(frame: pd.DataFrame, col: str) -> Optional[str]:
    if frame.empty or pd.isna(frame[col].iloc[0]):
        return None
    return str(frame[col].iloc[0])


def compute_key_findings(df: pd.DataFrame) -> KeyFindings:
    borough = top_borough(df)
    month = peak_month(df)
    locations = top_location_types(df, n=3)
    dates = df["created_date"]
    return KeyFindings(
        total=len(df),
        first_date=dates.min() if not df.empty else None,
        last_date=dates.max() if not df.empty else None,
        top_borough=_first(borough, "Borough"),
        top_borough_count=int(borough["n"].iloc[0]) if not borough.empty else 0,
        peak_month=_first(month, "sighting_month"),
        top_location=_first(locations, "Location Type"),
    )


def _print_step(title: str) -> None:
    print(f"\n{title}\n{RULE}")


def _print_report(findings: KeyFindings, output_dir: Path, clean_path: Path) -> None:
    na = "N/A"
    print(f"\n{BANNER}\n  ANALYSIS COMPLETE!\n{BANNER}\n")
    print("Summary of outputs:")
    print(f"  - Cleaned data: {clean_path}")
    print(f"  - 6 visualization files (PNG + PDF): {output_dir}")
    print(f"  - Summary statistics CSVs: {output_dir}\n")
    print("Key Findings:")
    print(f"  - Total rat sightings: {findings.total:,}")
    print(f"  - Date range: {findings.first_date} to {findings.last_date}")
    print(
        f"  - Borough with most sightings: {findings.top_borough or na} "
        f"({findings.top_borough_count:,})"
    )
    print(f"  - Peak sighting month: {findings.peak_month or na}")
    print(f"  - Most common location: {findings.top_location or na}\n")
    print(BANNER + "\n")


def run_analysis(
    data_file: str | os.PathLike = DEFAULT_DATA_FILE,
    output_dir: str | os.PathLike = DEFAULT_OUTPUT_DIR,
    clean_filename: str = CLEAN_FILENAME,
    plot_cfg: Optional[Dict] = None,
) -> PipelineResult:
    """Clean, summarize, chart and export the sightings data in one pass.

    Steps run strictly in order and any exception aborts the run; files
    already written by earlier steps are left in place.
    """
    out_dir = Path(output_dir)
    ensure_dirs(out_dir)

    print(f"\n{BANNER}\n  NYC RAT SIGHTINGS ANALYSIS PIPELINE\n{BANNER}")

    _print_step("STEP 1: Loading and Cleaning Data")
    df = load_and_clean_rat_data(data_file)

    _print_step("STEP 2: Generating Summary Statistics")
    summarize_data(df)
    print("Peak Rat Sighting Month:")
    print(peak_month(df).to_string(index=False))
    print("\nBorough with Most Sightings:")
    print(top_borough(df).to_string(index=False))
    print("\nTop 3 Location Types:")
    print(top_location_types(df, n=3).to_string(index=False))

    _print_step("STEP 3: Creating Visualizations")
    figures = generate_all_plots(df, output_dir=out_dir, plot_cfg=plot_cfg)

    _print_step("STEP 4: Exporting Results")
    clean_path = export_clean_data(df, output_path=out_dir / clean_filename)
    summary_paths = export_summaries(df, output_dir=out_dir)

    findings = compute_key_findings(df)
    _print_report(findings, out_dir, clean_path)

    return PipelineResult(
        data=df,
        findings=findings,
        clean_path=clean_path,
        summary_paths=summary_paths,
        figures=figures,
    )


__all__ = ["KeyFindings", "PipelineResult", "compute_key_findings", "run_analysis"]
