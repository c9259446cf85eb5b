"""Entry points for reading typed values out of regular expression matches.

Supported targets:

- ``str``: the captured text, verbatim
- ``bool``: True when the group participated in the match
- integer, float and ``Decimal`` kinds (see :mod:`matchvalues.kinds`),
  ``uuid.UUID`` and enum classes: the captured text, parsed
- ``X | None``: as ``X``, but blank text gives None instead of an error
- ``list[X]``: one ``X`` per capture of the group
- ``Group`` / ``Capture``: the group or its last capture
- ``tuple[A, B, ...]`` and ``typing.NamedTuple`` classes: one item per group

Without group names, a single value reads the first capturing group (or
the whole match when the pattern has none), and a tuple reads groups 1..N.

A group that did not participate gives None, or zero/False for
non-nullable numbers and booleans.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from matchvalues.binding import resolve
from matchvalues.converter import convert_group
from matchvalues.exceptions import MatchFailedError
from matchvalues.match import MatchResult
from matchvalues.shapes import describe_target

T = TypeVar("T")


@overload
def try_get_value(match: Any, target: type[T], *group_names: str) -> tuple[bool, T]: ...


@overload
def try_get_value(match: Any, target: Any, *group_names: str) -> tuple[bool, Any]: ...


def try_get_value(match: Any, target: Any, *group_names: str) -> tuple[bool, Any]:
    """Attempt to read a value of type ``target`` from ``match``.

    Args:
        match: ``re.Match``, ``regex.Match``, MatchResult, or None for no match
        target: Requested type
        group_names: Group names to read, one per output value

    Returns:
        ``(True, value)`` for a successful match, ``(False, absent value)``
        otherwise

    Raises:
        FormatError: Captured text cannot be parsed as the requested type
        NumericOverflowError: Captured number is out of range
        UnsupportedTypeError: Requested type is not supported
        UnsupportedShapeError: Tuple type with fewer than two items
        ArityMismatchError: Wrong number of group names
        InsufficientGroupsError: Too few capturing groups for the tuple
    """
    view = MatchResult.of(match)
    shape = describe_target(target)
    if not view.succeeded:
        return False, shape.absent()

    binding = resolve(shape, group_names, view)
    values = [
        convert_group(group, slot)
        for group, slot in zip(binding.groups, shape.slots)
    ]
    return True, shape.assemble(values)


@overload
def try_get(match: Any, target: type[T], *group_names: str) -> T | None: ...


@overload
def try_get(match: Any, target: Any, *group_names: str) -> Any: ...


def try_get(match: Any, target: Any, *group_names: str) -> Any:
    """Return the value for a successful match, or the absent value otherwise."""
    _, value = try_get_value(match, target, *group_names)
    return value


@overload
def get(match: Any, target: type[T], *group_names: str) -> T: ...


@overload
def get(match: Any, target: Any, *group_names: str) -> Any: ...


def get(match: Any, target: Any, *group_names: str) -> Any:
    """Return the value of type ``target`` for a successful match.

    Raises:
        MatchFailedError: The match did not succeed
    """
    found, value = try_get_value(match, target, *group_names)
    if not found:
        raise MatchFailedError("Match failed.")
    return value


__all__ = ["get", "try_get", "try_get_value"]
