"""matchvalues - typed values from regular expression matches.

The primary interface is the `get()` function:

    import re
    import matchvalues

    match = re.search(r"([0-9]+)/([0-9]+)", "22/7")
    numerator, denominator = matchvalues.get(match, tuple[int, int])

Related entry points:
    - matchvalues.try_get() - absent value instead of an error for no match
    - matchvalues.try_get_value() - ``(found, value)`` pair
    - matchvalues.RegexExtractor - compiled pattern bound to a target type
"""

from matchvalues._version import __version__
from matchvalues.api import get, try_get, try_get_value
from matchvalues.extractor import RegexExtractor
from matchvalues.kinds import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from matchvalues.match import Capture, Group, MatchResult
from matchvalues.exceptions import (
    MatchValuesError,
    MatchFailedError,
    UnsupportedShapeError,
    UnsupportedTypeError,
    ArityMismatchError,
    InsufficientGroupsError,
    FormatError,
    NumericOverflowError,
)

__all__ = [
    # Main API
    "get",
    "try_get",
    "try_get_value",
    "RegexExtractor",
    # Match view
    "MatchResult",
    "Group",
    "Capture",
    # Numeric kinds
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    # Exceptions
    "MatchValuesError",
    "MatchFailedError",
    "UnsupportedShapeError",
    "UnsupportedTypeError",
    "ArityMismatchError",
    "InsufficientGroupsError",
    "FormatError",
    "NumericOverflowError",
    # Version
    "__version__",
]
