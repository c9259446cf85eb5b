"""matchvalues exception hierarchy.

All matchvalues exceptions inherit from MatchValuesError, allowing
callers to catch any conversion problem with a single except clause:

    try:
        day, month = matchvalues.get(match, tuple[int, str])
    except matchvalues.MatchValuesError as e:
        handle_gracefully(e)

Each domain exception also inherits from its stdlib counterpart so
plain ``except ValueError:`` / ``except TypeError:`` handlers keep working.
"""

from __future__ import annotations

from typing import Any


def _type_name(target: Any) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)


class MatchValuesError(Exception):
    """Base exception for all matchvalues errors."""


class MatchFailedError(MatchValuesError, LookupError):
    """The match did not succeed, so there is no value to return."""


class UnsupportedShapeError(MatchValuesError, TypeError):
    """Tuple-like target with fewer than two items."""


class UnsupportedTypeError(MatchValuesError, TypeError):
    """Requested type is not one of the supported kinds."""


class ArityMismatchError(MatchValuesError, ValueError):
    """Number of group names differs from the number of output slots."""


class InsufficientGroupsError(MatchValuesError, ValueError):
    """Pattern has fewer capturing groups than the tuple needs."""


class FormatError(MatchValuesError, ValueError):
    """Captured text is not a valid literal for the requested type."""

    def __init__(self, text: str, target: Any) -> None:
        self.text = text
        self.target = target
        super().__init__(f"Cannot parse {text!r} as {_type_name(target)}.")


class NumericOverflowError(MatchValuesError, OverflowError):
    """Captured number does not fit the requested type."""

    def __init__(self, text: str, target: Any) -> None:
        self.text = text
        self.target = target
        super().__init__(
            f"Value {text!r} is out of range for {_type_name(target)}."
        )


__all__ = [
    "MatchValuesError",
    "MatchFailedError",
    "UnsupportedShapeError",
    "UnsupportedTypeError",
    "ArityMismatchError",
    "InsufficientGroupsError",
    "FormatError",
    "NumericOverflowError",
]
