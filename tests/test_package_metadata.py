"""Tests for package metadata and exports."""

import matchvalues


def test_version_string_format():
    assert isinstance(matchvalues.__version__, str)
    assert matchvalues.__version__
    assert "." in matchvalues.__version__


def test_core_api_accessible():
    """Primary API functions should be importable directly."""
    assert callable(matchvalues.get)
    assert callable(matchvalues.try_get)
    assert callable(matchvalues.try_get_value)
    assert callable(matchvalues.RegexExtractor)


def test_exceptions_accessible():
    """Exception classes should be directly accessible."""
    assert issubclass(matchvalues.MatchValuesError, Exception)
    assert issubclass(matchvalues.FormatError, matchvalues.MatchValuesError)
    assert issubclass(matchvalues.MatchFailedError, matchvalues.MatchValuesError)


def test_all_exports_resolve():
    for name in matchvalues.__all__:
        assert hasattr(matchvalues, name), name
