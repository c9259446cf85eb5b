from __future__ import annotations

import enum
import uuid
from decimal import Decimal
from typing import NamedTuple, Optional

import pytest

from matchvalues.kinds import Float32, Int16, UInt8
from matchvalues.match import Capture, Group
from matchvalues.shapes import ABSENT, ValueKind, describe_target, describe_value


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Permission(enum.Flag):
    READ = 1
    WRITE = 2


class Point(NamedTuple):
    x: int
    y: int | None


class Single(NamedTuple):
    value: str


@pytest.mark.parametrize(
    ("target", "kind", "nullable"),
    [
        (Group, ValueKind.GROUP, True),
        (Capture, ValueKind.CAPTURE, True),
        (str, ValueKind.STRING, True),
        (str | None, ValueKind.STRING, True),
        (bool, ValueKind.BOOLEAN, False),
        (bool | None, ValueKind.BOOLEAN, True),
        (int, ValueKind.NUMERIC, False),
        (Optional[int], ValueKind.NUMERIC, True),
        (UInt8, ValueKind.NUMERIC, False),
        (Float32 | None, ValueKind.NUMERIC, True),
        (Decimal, ValueKind.NUMERIC, False),
        (uuid.UUID, ValueKind.IDENTIFIER, False),
        (Color, ValueKind.ENUM, False),
        (Color | None, ValueKind.ENUM, True),
        (list[int], ValueKind.ARRAY, True),
        (type, ValueKind.UNSUPPORTED, True),
        (int | str, ValueKind.UNSUPPORTED, True),
        (dict[str, int], ValueKind.UNSUPPORTED, True),
    ],
)
def test_describe_value_kinds(target, kind, nullable):
    spec = describe_value(target)

    assert spec.kind is kind
    assert spec.nullable is nullable


def test_array_item_spec():
    spec = describe_value(list[int | None])

    assert spec.item.kind is ValueKind.NUMERIC
    assert spec.item.nullable is True


@pytest.mark.parametrize(
    ("target", "zero"),
    [
        (bool, False),
        (int, 0),
        (Int16, 0),
        (float, 0.0),
        (Decimal, Decimal(0)),
        (uuid.UUID, uuid.UUID(int=0)),
        (Permission, Permission(0)),
        (Color, None),
        (int | None, None),
        (str, None),
        (list[int], None),
    ],
)
def test_zero_values(target, zero):
    assert describe_value(target).zero() == zero


def test_zero_value_has_requested_kind():
    assert type(describe_value(Int16).zero()) is Int16


def test_scalar_shape():
    shape = describe_target(int)

    assert shape.is_tuple is False
    assert shape.arity == 1
    assert shape.absent() == 0
    assert shape.assemble([ABSENT]) == 0
    assert shape.assemble([7]) == 7


def test_tuple_shape():
    shape = describe_target(tuple[int, str | None])

    assert shape.is_tuple is True
    assert shape.nullable is False
    assert [slot.kind for slot in shape.slots] == [ValueKind.NUMERIC, ValueKind.STRING]
    assert shape.absent() == (0, None)
    assert shape.assemble([1, "a"]) == (1, "a")


def test_nullable_tuple_shape():
    shape = describe_target(tuple[int, int] | None)

    assert shape.is_tuple is True
    assert shape.nullable is True
    assert shape.absent() is None


def test_named_tuple_shape():
    shape = describe_target(Point)

    assert shape.is_tuple is True
    assert [slot.target for slot in shape.slots] == [int, int | None]
    assert shape.assemble([1, ABSENT]) == Point(1, None)
    assert isinstance(shape.absent(), Point)


@pytest.mark.parametrize(
    ("target", "arity"),
    [(tuple, 0), (tuple[()], 0), (tuple[int, ...], 0), (tuple[int], 1), (Single, 1)],
)
def test_small_tuple_likes_are_tuple_shapes(target, arity):
    shape = describe_target(target)

    assert shape.is_tuple is True
    assert shape.arity == arity
    assert shape.absent() is None


def test_shapes_are_cached():
    assert describe_target(tuple[int, str]) is describe_target(tuple[int, str])
