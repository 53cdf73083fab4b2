"""
Data model (per-year results, projections, coordinates)
=======================================================

Raw FARS tables stay pandas DataFrames. This module names the pieces that
are built on top of them:

- Two projections of the same raw table:
  `NORMALIZED_COLUMNS` (what the month/year summary needs) and
  `MAP_COLUMNS` (what the state map needs).
- A per-year result union: `YearLoaded` or `YearFailed`. Multi-year reads
  collect one of these per requested year, in request order.
- Coordinate sentinels: FARS stores "unknown" positions as large numbers
  (e.g. LONGITUD 999.9999). `sanitize_coordinates` turns them into NaN.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import pandas as pd

MONTH = "MONTH"
YEAR = "YEAR"
STATE = "STATE"
LONGITUDE = "LONGITUD"
LATITUDE = "LATITUDE"

NORMALIZED_COLUMNS = (MONTH, YEAR)
MAP_COLUMNS = (STATE, LONGITUDE, LATITUDE)

# Anything above these is a FARS "not reported / unknown" code
MAX_VALID_LONGITUDE = 900
MAX_VALID_LATITUDE = 90


@dataclass(frozen=True)
class YearLoaded:
    """One year that was read and normalized successfully."""
    year: int
    table: pd.DataFrame

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class YearFailed:
    """One year that could not be read; `reason` is the caught error."""
    year: int
    reason: Exception

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        return f"{type(self.reason).__name__}: {self.reason}"


YearResult = Union[YearLoaded, YearFailed]


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of `df` with sentinel coordinates replaced by NaN.

    Non-numeric cells are treated the same way as sentinels.
    """
    out = df.copy()
    lon = pd.to_numeric(out[LONGITUDE], errors="coerce")
    lat = pd.to_numeric(out[LATITUDE], errors="coerce")
    out[LONGITUDE] = lon.where(lon <= MAX_VALID_LONGITUDE)
    out[LATITUDE] = lat.where(lat <= MAX_VALID_LATITUDE)
    return out


def coordinate_bounds(df: pd.DataFrame) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """Return ((lon_min, lon_max), (lat_min, lat_max)) over non-missing values.

    Returns None when either axis has no usable value.
    """
    lon = df[LONGITUDE].dropna()
    lat = df[LATITUDE].dropna()
    if lon.empty or lat.empty:
        return None
    return (float(lon.min()), float(lon.max())), (float(lat.min()), float(lat.max()))
