"""
FARS package
============

Helpers for the Fatality Analysis Reporting System (FARS) accident files.

- File naming and CSV loading are in `fars/loader.py`.
- Multi-year reading and the month x year summary are in `fars/engine.py`.
- The state scatter map is in `fars/mapping.py`.
"""

from .config import FarsConfig, DEFAULT_CONFIG
from .errors import (
    FarsError,
    FarsWarning,
    DataFileNotFound,
    ParseFailure,
    MissingColumnsError,
    InvalidStateError,
    YearConversionError,
)
from .loader import make_filename, fars_read
from .engine import fars_read_years, fars_summarize_years, read_year_results
from .mapping import fars_map_state

__version__ = '0.1.0'

__all__ = [
    "FarsConfig", "DEFAULT_CONFIG",
    "FarsError", "FarsWarning", "DataFileNotFound", "ParseFailure",
    "MissingColumnsError", "InvalidStateError", "YearConversionError",
    "make_filename", "fars_read",
    "fars_read_years", "fars_summarize_years", "read_year_results",
    "fars_map_state",
]
