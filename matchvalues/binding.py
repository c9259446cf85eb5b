"""Binding of output slots to match groups."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from matchvalues.exceptions import (
    ArityMismatchError,
    InsufficientGroupsError,
    UnsupportedShapeError,
)
from matchvalues.match import Group, MatchResult
from matchvalues.shapes import TargetShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupBinding:
    shape: TargetShape
    groups: tuple[Group, ...]


def resolve(
    shape: TargetShape,
    group_names: Sequence[str],
    match: MatchResult,
) -> GroupBinding:
    """Pick the group feeding each slot of ``shape``.

    With no group names, a scalar reads capturing group 1 (or the whole match
    when the pattern has no capturing groups) and a tuple of N items reads
    groups 1..N. With group names, there must be one name per slot.

    Args:
        shape: Target shape to fill
        group_names: Group names, one per slot, or empty for positional binding
        match: A successful match

    Returns:
        GroupBinding with one group per slot

    Raises:
        UnsupportedShapeError: Tuple target with fewer than two items
        ArityMismatchError: Wrong number of group names
        InsufficientGroupsError: Too few capturing groups for the tuple
    """
    if shape.is_tuple:
        count = shape.arity
        if count < 2:
            raise UnsupportedShapeError(
                f"Tuple must have at least two types: {shape.target!r}"
            )
        if group_names:
            if len(group_names) != count:
                raise ArityMismatchError(
                    f"There must be the same number of group names as tuple values ({count})."
                )
            groups = tuple(match.group(name) for name in group_names)
        else:
            if match.group_count < count + 1:
                raise InsufficientGroupsError(
                    f"Regex must have at least {count} capturing groups; "
                    f"it has {match.group_count - 1}."
                )
            groups = tuple(match.group(index + 1) for index in range(count))
    elif group_names:
        if len(group_names) != 1:
            raise ArityMismatchError(
                "There must be exactly one group name for the specified type."
            )
        groups = (match.group(group_names[0]),)
    else:
        groups = (match.group(1 if match.group_count > 1 else 0),)

    logger.debug(
        "Bound %r to groups %s",
        shape.target,
        [group.name or group.index for group in groups],
    )
    return GroupBinding(shape=shape, groups=groups)


__all__ = ["GroupBinding", "resolve"]
