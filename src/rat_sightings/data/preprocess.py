from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_DATA_FILE

NA_TOKENS = ["", "NA", "N/A"]

TEXT_COLUMNS = [
    "Created Date",
    "Closed Date",
    "Borough",
    "Complaint Type",
    "Descriptor",
    "Location Type",
]

CREATED_DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# School, vehicle, taxi, bridge/highway, garage and ferry fields.
COLUMNS_TO_REMOVE = [
    "School Name",
    "School Number",
    "School Region",
    "School Code",
    "School Phone Number",
    "School Address",
    "School City",
    "School State",
    "School Zip",
    "School Not Found",
    "School or Citywide Complaint",
    "Vehicle Type",
    "Taxi Company Borough",
    "Taxi Pick Up Location",
    "Bridge Highway Name",
    "Bridge Highway Direction",
    "Road Ramp",
    "Bridge Highway Segment",
    "Garage Lot Name",
    "Ferry Direction",
    "Ferry Terminal Name",
]

UNSPECIFIED_BOROUGH = "Unspecified"


def load_raw_data(file_path: str | os.PathLike = DEFAULT_DATA_FILE) -> pd.DataFrame:
    path = Path(file_path)
    print(f"Loading rat sightings data from: {path}")
    if not path.is_file():
        raise FileNotFoundError(f"Expected rat sightings CSV at '{path}'.")

    header = pd.read_csv(path, nrows=0).columns
    dtypes = {c: str for c in TEXT_COLUMNS if c in header}
    df = pd.read_csv(
        path,
        dtype=dtypes,
        na_values=NA_TOKENS,
        keep_default_na=False,
        low_memory=False,
    )
    print(f"Initial rows loaded: {len(df):,}")
    return df


def parse_created_date(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["created_date"] = pd.to_datetime(
        df["Created Date"], format=CREATED_DATE_FORMAT, errors="coerce"
    )
    return df


def add_temporal_features(df: pd.DataFrame) -> pd.DataFrame:
    """Derive year, month, day and weekday from ``created_date``.

    Month and weekday are ordered categoricals with fixed English labels so the
    output does not depend on the process locale. ``dt.dayofweek`` counts from
    Monday=0, so it is shifted by one to index the Sunday-first labels.
    """
    df = df.copy()
    dt = df["created_date"].dt
    df["sighting_year"] = dt.year.astype("Int64")
    df["sighting_month"] = pd.Categorical.from_codes(
        dt.month.fillna(0).astype(int) - 1, categories=MONTH_LABELS, ordered=True
    )
    df["sighting_day"] = dt.day.astype("Int64")
    weekday_codes = ((dt.dayofweek + 1) % 7).fillna(-1).astype(int)
    df["sighting_weekday"] = pd.Categorical.from_codes(
        weekday_codes, categories=WEEKDAY_LABELS, ordered=True
    )
    return df


def drop_irrelevant_columns(df: pd.DataFrame) -> pd.DataFrame:
    return df.drop(columns=COLUMNS_TO_REMOVE, errors="ignore")


def filter_valid_records(df: pd.DataFrame) -> pd.DataFrame:
    if "Borough" not in df.columns:
        raise ValueError("Required column 'Borough' not found in dataframe.")
    mask = (
        df["created_date"].notna()
        & df["Borough"].notna()
        & df["Borough"].ne(UNSPECIFIED_BOROUGH)
    )
    return df.loc[mask].reset_index(drop=True)


def clean_rat_data(df: pd.DataFrame) -> pd.DataFrame:
    before = len(df)
    df = parse_created_date(df)
    if before and df["created_date"].isna().all():
        print(
            f"⚠ No 'Created Date' values matched the format '{CREATED_DATE_FORMAT}'; "
            "every row will be dropped."
        )
    df = add_temporal_features(df)
    df = drop_irrelevant_columns(df)
    df = filter_valid_records(df)
    print(f"Rows after cleaning: {len(df):,} (dropped {before - len(df):,})")
    return df


def load_and_clean_rat_data(file_path: str | os.PathLike = DEFAULT_DATA_FILE) -> pd.DataFrame:
    df = load_raw_data(file_path)
    df = clean_rat_data(df)
    print("Data cleaning complete!")
    return df


__all__ = [
    "COLUMNS_TO_REMOVE",
    "MONTH_LABELS",
    "WEEKDAY_LABELS",
    "load_raw_data",
    "parse_created_date",
    "add_temporal_features",
    "drop_irrelevant_columns",
    "filter_valid_records",
    "clean_rat_data",
    "load_and_clean_rat_data",
]
