from __future__ import annotations

import pandas as pd

from ..data.scan import count_by


def analyze_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """Sightings per borough for one year, busiest borough first."""
    subset = df[df["sighting_year"] == year]
    return count_by(subset, "Borough", sort=True, name="sightings")


def compare_boroughs(df: pd.DataFrame, borough1: str, borough2: str) -> pd.DataFrame:
    """Year-by-year sightings for two boroughs side by side.

    One row per year present for either borough; a borough with no sightings
    in that year gets a missing value, not zero.
    """
    subset = df[df["Borough"].isin([borough1, borough2])]
    counts = count_by(subset, ["Borough", "sighting_year"], name="sightings")
    wide = counts.pivot(index="sighting_year", columns="Borough", values="sightings")
    wide.columns.name = None
    return wide.reset_index()


__all__ = ["analyze_year", "compare_boroughs"]
