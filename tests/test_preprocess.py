from __future__ import annotations

import pandas as pd
import pytest

from rat_sightings.data.preprocess import (
    COLUMNS_TO_REMOVE,
    MONTH_LABELS,
    WEEKDAY_LABELS,
    add_temporal_features,
    drop_irrelevant_columns,
    filter_valid_records,
    load_and_clean_rat_data,
    load_raw_data,
    parse_created_date,
)


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_raw_data(tmp_path / "nope.csv")


def test_unreadable_path_is_fatal(tmp_path):
    folder = tmp_path / "Rat_Sightings.csv"
    folder.mkdir()
    with pytest.raises(OSError):
        load_raw_data(folder)


def test_missing_tokens_and_text_columns(raw_df: pd.DataFrame):
    assert len(raw_df) == 10
    borough = raw_df.set_index("Unique Key")["Borough"]
    assert pd.isna(borough[1007])
    assert pd.isna(borough[1008])
    assert borough[1009] == "Unspecified"
    assert pd.isna(raw_df.loc[raw_df["Unique Key"] == 1008, "Descriptor"]).all()
    assert pd.api.types.is_string_dtype(raw_df["Created Date"])
    assert pd.api.types.is_float_dtype(raw_df["Latitude"])


def test_scenario_keeps_six_rows(raw_df, clean_df):
    assert len(clean_df) == 6
    assert len(clean_df) <= len(raw_df)
    assert sorted(clean_df["Unique Key"]) == [1001, 1002, 1003, 1004, 1005, 1006]


def test_cleaned_rows_satisfy_invariants(raw_df, clean_df):
    assert clean_df["created_date"].notna().all()
    assert clean_df["Borough"].notna().all()
    assert not clean_df["Borough"].eq("Unspecified").any()
    raw_boroughs = set(raw_df["Borough"].dropna()) - {"Unspecified"}
    assert set(clean_df["Borough"]) <= raw_boroughs


def test_excluded_columns_absent(clean_df):
    assert not set(COLUMNS_TO_REMOVE) & set(clean_df.columns)
    assert "Latitude" in clean_df.columns


def test_drop_ignores_absent_columns():
    df = pd.DataFrame({"Borough": ["BRONX"], "Vehicle Type": [None]})
    out = drop_irrelevant_columns(df)
    assert list(out.columns) == ["Borough"]
    assert list(drop_irrelevant_columns(out).columns) == ["Borough"]


def test_derived_fields_match_created_date(clean_df):
    row = clean_df.loc[clean_df["Unique Key"] == 1001].iloc[0]
    assert row["created_date"] == pd.Timestamp("2016-07-04 10:00:00")
    assert row["sighting_year"] == 2016
    assert row["sighting_month"] == "Jul"
    assert row["sighting_day"] == 4
    assert row["sighting_weekday"] == "Mon"

    for _, r in clean_df.iterrows():
        ts = r["created_date"]
        assert r["sighting_year"] == ts.year
        assert r["sighting_month"] == MONTH_LABELS[ts.month - 1]
        assert r["sighting_day"] == ts.day
        assert r["sighting_weekday"] == WEEKDAY_LABELS[(ts.dayofweek + 1) % 7]


def test_pm_times_parse_to_24h(clean_df):
    ts = clean_df.loc[clean_df["Unique Key"] == 1003, "created_date"].iloc[0]
    assert ts == pd.Timestamp("2015-01-15 20:30:00")


def test_month_and_weekday_are_ordered(clean_df):
    month = clean_df["sighting_month"].dtype
    weekday = clean_df["sighting_weekday"].dtype
    assert month.ordered and list(month.categories) == MONTH_LABELS
    assert weekday.ordered and list(weekday.categories) == WEEKDAY_LABELS


def test_unparseable_date_becomes_missing_before_filter(raw_df):
    parsed = add_temporal_features(parse_created_date(raw_df))
    bad = parsed.loc[parsed["Unique Key"] == 1010].iloc[0]
    assert pd.isna(bad["created_date"])
    assert pd.isna(bad["sighting_year"])
    assert pd.isna(bad["sighting_month"])
    assert pd.isna(bad["sighting_weekday"])
    assert len(parsed) == len(raw_df)


def test_filter_requires_borough_column():
    df = pd.DataFrame({"created_date": [pd.Timestamp("2016-01-01")]})
    with pytest.raises(ValueError, match="Borough"):
        filter_valid_records(df)


def test_format_mismatch_drops_everything_with_warning(iso_csv, capsys):
    # ISO timestamps do not match the month/day/year layout; every row is lost.
    # This is surfaced as a warning rather than an error.
    df = load_and_clean_rat_data(iso_csv)
    assert df.empty
    assert "⚠" in capsys.readouterr().out


def test_load_and_clean_reports_counts(raw_csv, capsys):
    df = load_and_clean_rat_data(raw_csv)
    out = capsys.readouterr().out
    assert "Initial rows loaded: 10" in out
    assert "Rows after cleaning: 6" in out
    assert len(df) == 6
