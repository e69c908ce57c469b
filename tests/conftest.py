import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rat_sightings.data.preprocess import clean_rat_data, load_raw_data

HEADER = [
    "Unique Key",
    "Created Date",
    "Closed Date",
    "Complaint Type",
    "Descriptor",
    "Location Type",
    "Borough",
    "School Name",
    "Vehicle Type",
    "Ferry Direction",
    "Latitude",
]

# Ten reports: two with a missing borough ("" and "N/A"), one "Unspecified"
# borough and one unparseable creation date, leaving six valid rows.
SCENARIO_ROWS = [
    ["1001", "07/04/2016 10:00:00 AM", "07/05/2016 09:00:00 AM", "Rodent", "Rat Sighting", "3+ Family Apt. Building", "BROOKLYN", "Unspecified", "", "", "40.67"],
    ["1002", "07/04/2016 10:00:00 AM", "", "Rodent", "Rat Sighting", "3+ Family Apt. Building", "BROOKLYN", "Unspecified", "", "", "40.68"],
    ["1003", "01/15/2015 08:30:00 PM", "01/20/2015 10:00:00 AM", "Rodent", "Rat Sighting", "Commercial Building", "MANHATTAN", "Unspecified", "", "", "40.75"],
    ["1004", "03/02/2017 11:15:00 AM", "", "Rodent", "Rat Sighting", "Vacant Lot", "BRONX", "Unspecified", "", "", "40.84"],
    ["1005", "12/24/2016 06:45:00 PM", "", "Rodent", "Rat Sighting", "3+ Family Apt. Building", "QUEENS", "Unspecified", "", "", "40.72"],
    ["1006", "05/10/2015 07:00:00 AM", "", "Rodent", "Rat Sighting", "1-2 Family Dwelling", "STATEN ISLAND", "Unspecified", "", "", "40.58"],
    ["1007", "06/01/2016 01:00:00 PM", "", "Rodent", "Rat Sighting", "Vacant Lot", "", "Unspecified", "", "", ""],
    ["1008", "08/09/2016 02:00:00 PM", "", "Rodent", "NA", "Vacant Lot", "N/A", "Unspecified", "", "", ""],
    ["1009", "09/09/2016 09:00:00 AM", "", "Rodent", "Rat Sighting", "Vacant Lot", "Unspecified", "Unspecified", "", "", "40.70"],
    ["1010", "not a date", "", "Rodent", "Rat Sighting", "Vacant Lot", "BROOKLYN", "Unspecified", "", "", "40.69"],
]


def write_csv(path: Path, rows, header=HEADER) -> Path:
    lines = [",".join(header)] + [",".join(r) for r in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def raw_csv(tmp_path) -> Path:
    return write_csv(tmp_path / "Rat_Sightings.csv", SCENARIO_ROWS)


@pytest.fixture
def raw_df(raw_csv):
    return load_raw_data(raw_csv)


@pytest.fixture
def clean_df(raw_df):
    return clean_rat_data(raw_df)


@pytest.fixture
def iso_csv(tmp_path) -> Path:
    rows = [r[:1] + ["2016-07-04 10:00:00"] + r[2:] for r in SCENARIO_ROWS]
    return write_csv(tmp_path / "iso_dates.csv", rows)


@pytest.fixture
def empty_clean_df(iso_csv):
    return clean_rat_data(load_raw_data(iso_csv))
