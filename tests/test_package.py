"""The public surface exported from `fars`."""
import fars


def test_public_operations_exported():
    for name in ("fars_read", "make_filename", "fars_read_years", "fars_summarize_years", "fars_map_state"):
        assert callable(getattr(fars, name))


def test_error_hierarchy():
    assert issubclass(fars.DataFileNotFound, fars.FarsError)
    assert issubclass(fars.MissingColumnsError, fars.ParseFailure)
    assert issubclass(fars.InvalidStateError, ValueError)
    assert issubclass(fars.YearConversionError, TypeError)
