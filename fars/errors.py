"""
Errors raised by the FARS helpers.

Only the per-year loop in `engine.read_year_results` recovers from any of
these (it turns them into a `FarsWarning`); everywhere else they propagate.
"""


class FarsError(Exception):
    """Base class for all FARS errors."""


class FarsWarning(UserWarning):
    """Emitted when one year of a multi-year read is skipped."""


class DataFileNotFound(FarsError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"file '{self.path}' does not exist")


class ParseFailure(FarsError, ValueError):
    """The file exists but could not be read as a CSV table."""


class MissingColumnsError(ParseFailure):
    def __init__(self, required, available):
        self.required = list(required)
        self.available = list(available)
        missing = [c for c in self.required if c not in self.available]
        super().__init__(
            f"Missing required column(s) {missing}. Required={self.required}. Available={self.available}"
        )


class InvalidStateError(FarsError, ValueError):
    def __init__(self, state_num):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


class YearConversionError(FarsError, TypeError, ValueError):
    """A year (or state code) could not be converted to an integer."""
