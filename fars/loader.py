"""
File naming and loading (CSV.bz2 -> DataFrame)
==============================================

This module knows where a year's accident file lives and how to read it.

Key ideas:
- `make_filename` is purely syntactic; it never touches the disk.
- `fars_read` either returns the whole table or raises; there is no
  partially-read result.
- Downstream code never uses the raw table directly. It asks for one of the
  two projections below (`normalized_view` or `map_view`), which check that
  the columns they need are present.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional, Union
import pandas as pd
import structlog

from .config import DEFAULT_CONFIG, FarsConfig
from .errors import DataFileNotFound, MissingColumnsError, ParseFailure, YearConversionError
from .models import MAP_COLUMNS, MONTH, NORMALIZED_COLUMNS, YEAR

logger = structlog.get_logger(__name__)

# Errors pandas (and the bz2/gzip readers underneath it) raise on bad content
_READ_ERRORS = (
    pd.errors.ParserError,
    pd.errors.EmptyDataError,
    UnicodeDecodeError,
    EOFError,
    OSError,
)


def to_int(x, what: str = "year") -> int:
    """Convert `x` to int the way R's as.integer does (truncating floats)."""
    try:
        return int(float(x)) if isinstance(x, str) else int(x)
    except (TypeError, ValueError, OverflowError) as e:
        raise YearConversionError(f"{what} must be an integer, got {x!r}") from e


def make_filename(year, *, config: Optional[FarsConfig] = None) -> str:
    """Return the path of the accident file for `year`.

    Example:
        make_filename(2015)  ->  ".../fars/extdata/accident_2015.csv.bz2"
    """
    config = config or DEFAULT_CONFIG
    year = to_int(year)
    return str(Path(config.data_dir) / config.filename_template.format(year=year))


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """Read one FARS CSV file (compressed or not) into a DataFrame.

    Raises:
        DataFileNotFound: the file does not exist.
        ParseFailure: the file exists but is not a readable CSV table.
    """
    path = Path(filename)
    if not path.exists():
        raise DataFileNotFound(filename)
    try:
        # low_memory=False keeps pandas from emitting mixed-dtype warnings
        df = pd.read_csv(path, compression="infer", low_memory=False)
    except _READ_ERRORS as e:
        raise ParseFailure(f"could not read '{filename}': {e}") from e
    logger.debug("Loaded accident file", path=str(filename), rows=len(df), columns=len(df.columns))
    return df


# ---------------- Projections ----------------
def _require(df: pd.DataFrame, columns: Iterable[str]) -> None:
    columns = list(columns)
    if any(c not in df.columns for c in columns):
        raise MissingColumnsError(columns, df.columns)


def normalized_view(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """Project a raw table to [MONTH, YEAR], stamping every row with `year`.

    Any YEAR column already in the file is replaced.
    """
    _require(df, [MONTH])
    out = df[[MONTH]].copy()
    out[YEAR] = int(year)
    return out.reset_index(drop=True)[list(NORMALIZED_COLUMNS)]


def map_view(df: pd.DataFrame) -> pd.DataFrame:
    """Project a raw table to the columns the state map uses."""
    _require(df, MAP_COLUMNS)
    return df[list(MAP_COLUMNS)].copy()
