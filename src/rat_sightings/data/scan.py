from __future__ import annotations

from typing import Hashable, List, Sequence, Union

import pandas as pd

BANNER = "=" * 40

Keys = Union[Hashable, Sequence[Hashable]]


def count_by(df: pd.DataFrame, keys: Keys, sort: bool = False, name: str = "n") -> pd.DataFrame:
    """Count rows per group of ``keys``.

    Groups come out in key order. With ``sort=True`` they are reordered by
    descending count using a stable sort, so tied groups keep their key order.
    Missing keys form their own group, and unused categorical levels are dropped.
    """
    key_list: List[Hashable] = [keys] if isinstance(keys, (str, int)) else list(keys)
    counts = (
        df.groupby(key_list, dropna=False, observed=True, sort=True)
        .size()
        .reset_index(name=name)
    )
    if sort:
        counts = counts.sort_values(name, ascending=False, kind="stable")
    return counts.reset_index(drop=True)


def peak_month(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, "sighting_month", sort=True).head(1)


def top_borough(df: pd.DataFrame) -> pd.DataFrame:
    return count_by(df, "Borough", sort=True).head(1)


def top_location_types(df: pd.DataFrame, n: int = 3) -> pd.DataFrame:
    return count_by(df, "Location Type", sort=True).head(n)


def summarize_data(df: pd.DataFrame) -> None:
    print(f"\n{BANNER}\nRAT SIGHTINGS DATA SUMMARY\n{BANNER}\n")

    print(f"Total Records: {len(df):,}")
    print(f"Date Range: {df['created_date'].min()} to {df['created_date'].max()}\n")

    print("Boroughs:")
    print(count_by(df, "Borough", sort=True).to_string(index=False))

    print("\nTop 5 Location Types:")
    print(count_by(df, "Location Type", sort=True).head(5).to_string(index=False))

    print("\nSightings by Year:")
    print(count_by(df, "sighting_year").to_string(index=False))

    print(f"\n{BANNER}\n")


__all__ = [
    "count_by",
    "peak_month",
    "top_borough",
    "top_location_types",
    "summarize_data",
]
