"""
Shared fixtures for the FARS test suite.

Accident files are generated on the fly as small bz2-compressed CSVs with
the same columns the real FARS files have (plus a few extras the code must
ignore).
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest
from shapely.geometry import box

from fars.config import FarsConfig


def accident_frame(rows):
    """Build a FARS-shaped table from (STATE, MONTH, LONGITUD, LATITUDE) tuples."""
    df = pd.DataFrame(rows, columns=["STATE", "MONTH", "LONGITUD", "LATITUDE"])
    df.insert(1, "ST_CASE", range(10001, 10001 + len(df)))
    df["FATALS"] = 1
    return df


def write_year(data_dir, year, df):
    path = data_dir / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "extdata"
    d.mkdir()
    # 2013: 5 rows, months 1/1/2/3/12
    write_year(d, 2013, accident_frame([
        (1, 1, -86.5, 32.4),
        (1, 1, -87.0, 33.1),
        (6, 2, -118.2, 34.0),
        (6, 3, -121.5, 38.6),
        (10, 12, -75.5, 39.2),
    ]))
    # 2014: 4 rows, months 1/2/2/3; the state 11 row has no usable position
    write_year(d, 2014, accident_frame([
        (6, 1, -122.4, 37.8),
        (6, 2, 999.9999, 99.9999),
        (10, 2, -75.6, 39.7),
        (11, 3, 999.9999, 99.9999),
    ]))
    # 2015: state 10 only, one row with unknown position
    write_year(d, 2015, accident_frame([
        (10, 4, -75.52, 39.15),
        (10, 5, -75.60, 38.70),
        (10, 5, 999.9999, 99.9999),
        (10, 6, -75.41, 97.7777),
    ]))
    return d


@pytest.fixture
def config(data_dir):
    return FarsConfig().with_data_dir(data_dir)


@pytest.fixture
def boundaries():
    import geopandas as gpd
    return gpd.GeoDataFrame(
        {"STATEFP": ["06", "10"]},
        geometry=[box(-124.4, 32.5, -114.1, 42.0), box(-75.8, 38.4, -75.0, 39.8)],
    )


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
