"""Description of the requested result type.

A target is either a scalar (one slot) or a tuple (one slot per item). Each
slot is described by a :class:`ValueSpec` saying how a group's text becomes
that slot's value. Descriptions are computed once per target type and cached.
"""

from __future__ import annotations

import enum
import functools
import types
import typing
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Sequence, get_args, get_origin, get_type_hints

from matchvalues.match import Capture, Group
from matchvalues.parsers import get_parser


class _Absent:
    """Sentinel for a group or capture with no value."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class ValueKind(enum.Enum):
    GROUP = "group"
    CAPTURE = "capture"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    IDENTIFIER = "identifier"
    ENUM = "enum"
    ARRAY = "array"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ValueSpec:
    """How to convert a group into one output value.

    Attributes:
        target: The type as requested, e.g. ``int | None``
        kind: Conversion rule selected for the type
        base: The type with any ``| None`` wrapper removed
        nullable: Whether an absent value is reported as None
        item: Spec of the elements for ARRAY kinds
    """

    target: Any
    kind: ValueKind
    base: Any
    nullable: bool
    item: ValueSpec | None = None

    def zero(self) -> Any:
        """Value reported when there is nothing to convert."""
        if self.nullable:
            return None
        if self.kind is ValueKind.BOOLEAN:
            return False
        if self.kind is ValueKind.NUMERIC:
            return self.base(0)
        if self.kind is ValueKind.IDENTIFIER:
            return uuid.UUID(int=0)
        if self.kind is ValueKind.ENUM:
            try:
                return self.base(0)
            except ValueError:
                return None
        return None


def _make_tuple(*items: Any) -> tuple:
    return items


@dataclass(frozen=True)
class TargetShape:
    """Scalar or tuple layout of the requested type."""

    target: Any
    slots: tuple[ValueSpec, ...]
    is_tuple: bool = False
    nullable: bool = False
    factory: Callable[..., Any] = _make_tuple

    @property
    def arity(self) -> int:
        return len(self.slots)

    def absent(self) -> Any:
        """Value reported for a match that did not succeed."""
        if not self.is_tuple:
            return self.slots[0].zero()
        if self.nullable or self.arity < 2:
            return None
        return self.assemble([ABSENT] * self.arity)

    def assemble(self, values: Sequence[Any]) -> Any:
        items = [
            slot.zero() if value is ABSENT else value
            for slot, value in zip(self.slots, values)
        ]
        if not self.is_tuple:
            return items[0]
        return self.factory(*items)


def _unwrap_optional(target: Any) -> tuple[Any, bool]:
    origin = get_origin(target)
    if origin is typing.Union or origin is types.UnionType:
        args = get_args(target)
        others = [arg for arg in args if arg is not type(None)]
        if len(others) == 1 and len(args) == 2:
            return others[0], True
    return target, False


def _is_named_tuple(target: Any) -> bool:
    return (
        get_origin(target) is None
        and isinstance(target, type)
        and issubclass(target, tuple)
        and hasattr(target, "_fields")
    )


def _tuple_item_types(target: Any) -> tuple[Any, ...] | None:
    """Item types of a tuple-like target, or None if it is not tuple-like.

    Variadic and unparameterized tuples report no items.
    """
    if target is tuple:
        return ()
    if get_origin(target) is tuple:
        args = get_args(target)
        if len(args) == 2 and args[1] is Ellipsis:
            return ()
        return tuple(arg for arg in args if arg != ())
    if _is_named_tuple(target):
        hints = get_type_hints(target)
        return tuple(hints.get(name, Any) for name in target._fields)
    return None


def describe_value(target: Any) -> ValueSpec:
    """Select the conversion rule for a single value of type ``target``."""
    base, optional = _unwrap_optional(target)
    origin = get_origin(base)
    if origin is not None:
        args = get_args(base)
        if origin is list and len(args) == 1:
            return ValueSpec(
                target, ValueKind.ARRAY, base, True, item=describe_value(args[0])
            )
        return ValueSpec(target, ValueKind.UNSUPPORTED, base, True)
    if base is Group:
        return ValueSpec(target, ValueKind.GROUP, base, True)
    if base is Capture:
        return ValueSpec(target, ValueKind.CAPTURE, base, True)
    if base is str:
        return ValueSpec(target, ValueKind.STRING, base, True)
    if base is bool:
        return ValueSpec(target, ValueKind.BOOLEAN, base, optional)
    if isinstance(base, type) and issubclass(base, enum.Enum):
        return ValueSpec(target, ValueKind.ENUM, base, optional)
    if get_parser(base) is not None:
        return ValueSpec(target, ValueKind.NUMERIC, base, optional)
    if base is uuid.UUID:
        return ValueSpec(target, ValueKind.IDENTIFIER, base, optional)
    return ValueSpec(target, ValueKind.UNSUPPORTED, base, True)


@functools.lru_cache(maxsize=None)
def describe_target(target: Any) -> TargetShape:
    """Return the (cached) shape of ``target``."""
    base, optional = _unwrap_optional(target)
    item_types = _tuple_item_types(base)
    if item_types is None:
        return TargetShape(target, (describe_value(target),))
    factory = base if _is_named_tuple(base) else _make_tuple
    return TargetShape(
        target,
        tuple(describe_value(item) for item in item_types),
        is_tuple=True,
        nullable=optional,
        factory=factory,
    )


__all__ = [
    "ABSENT",
    "TargetShape",
    "ValueKind",
    "ValueSpec",
    "describe_target",
    "describe_value",
]
