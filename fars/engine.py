"""
Multi-year reading and summary
==============================

1) For each requested year: build the filename, read it, keep [MONTH, YEAR]
2) A year that cannot be read becomes a `YearFailed` and a `FarsWarning`;
   the other years are still read
3) The summary stacks the good years, counts rows per (YEAR, MONTH) and
   spreads the years out into columns

The per-year loop is the only place in the package that recovers from an
error. Everything else lets errors propagate to the caller.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import warnings
import pandas as pd
import structlog

from .config import FarsConfig
from .errors import FarsError, FarsWarning
from .loader import fars_read, make_filename, normalized_view, to_int
from .models import MONTH, YEAR, YearFailed, YearLoaded, YearResult

logger = structlog.get_logger(__name__)


def read_year_results(years: Iterable, *, config: Optional[FarsConfig] = None) -> List[YearResult]:
    """Read each year independently and return one result per year.

    The output has the same length and order as `years`. Filename building
    happens outside the recovery boundary, so a year that is not an integer
    raises `YearConversionError` instead of producing a `YearFailed`.
    """
    results: List[YearResult] = []
    for year in years:
        filename = make_filename(year, config=config)
        year = to_int(year)
        try:
            table = normalized_view(fars_read(filename), year)
        except FarsError as e:
            failed = YearFailed(year=year, reason=e)
            logger.warning("Skipping year", year=year, error=failed.describe())
            warnings.warn(f"invalid year: {year} ({failed.describe()})", FarsWarning, stacklevel=2)
            results.append(failed)
            continue
        results.append(YearLoaded(year=year, table=table))
    return results


def fars_read_years(years: Iterable, *, config: Optional[FarsConfig] = None) -> List[Optional[pd.DataFrame]]:
    """Return one [MONTH, YEAR] table per year, or None where the year failed."""
    return [r.table if r.ok else None for r in read_year_results(years, config=config)]


def fars_summarize_years(years: Iterable, *, config: Optional[FarsConfig] = None) -> pd.DataFrame:
    """Count accidents per month for each year.

    Returns a DataFrame with a MONTH column plus one column per year that
    was read successfully. A month with no rows for a year holds <NA>.
    When no year could be read the result has no rows and only MONTH.
    Rows with a missing MONTH are counted in a final <NA> month row.
    """
    tables = [t for t in fars_read_years(years, config=config) if t is not None]
    if not tables:
        return pd.DataFrame(columns=[MONTH])

    combined = pd.concat(tables, ignore_index=True)
    counts = combined.groupby([MONTH, YEAR], dropna=False).size()
    wide = counts.unstack(YEAR).sort_index().astype("Int64")
    wide.index = wide.index.astype("Int64")
    wide.index.name = MONTH
    wide.columns.name = None
    return wide.reset_index()
