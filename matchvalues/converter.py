"""Conversion of groups and captures into typed values."""

from __future__ import annotations

import enum
import re
import uuid
from typing import Any

from matchvalues.exceptions import FormatError, UnsupportedTypeError
from matchvalues.match import Capture, Group
from matchvalues.parsers import get_parser
from matchvalues.shapes import ABSENT, ValueKind, ValueSpec

_HEX = "[0-9a-fA-F]"
_HYPHENATED = rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_UUID_RE = re.compile(
    rf"\s*(?:{_HEX}{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|\({_HYPHENATED}\))\s*",
    re.ASCII,
)
_ENUM_NUMBER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


def parse_uuid(text: str) -> uuid.UUID:
    """Parse the 32-digit, hyphenated, braced or parenthesized UUID forms."""
    if _UUID_RE.fullmatch(text) is None:
        raise FormatError(text, uuid.UUID)
    return uuid.UUID(text.strip().strip("{}()"))


def _enum_member(enum_type: type[enum.Enum], name: str) -> enum.Enum | None:
    folded = name.casefold()
    for member_name, member in enum_type.__members__.items():
        if member_name.casefold() == folded:
            return member
    return None


def parse_enum(text: str, enum_type: type[enum.Enum]) -> enum.Enum:
    """Parse a member name (ignoring case), a member value, or for flags a
    comma-separated list of member names."""
    value = text.strip()
    if _ENUM_NUMBER_RE.fullmatch(value):
        try:
            return enum_type(int(value))
        except ValueError:
            raise FormatError(text, enum_type) from None

    names = [part.strip() for part in value.split(",")]
    if len(names) > 1 and not issubclass(enum_type, enum.Flag):
        raise FormatError(text, enum_type)
    members = [_enum_member(enum_type, name) for name in names]
    if any(member is None for member in members):
        raise FormatError(text, enum_type)

    result = members[0]
    for member in members[1:]:
        result |= member
    return result


def convert_capture(capture: Capture, spec: ValueSpec) -> Any:
    """Convert one capture; returns ABSENT for a blank nullable capture."""
    if spec.kind is ValueKind.CAPTURE:
        return capture

    text = capture.text
    if spec.kind is ValueKind.STRING:
        return text
    if spec.kind is ValueKind.BOOLEAN:
        return True
    if spec.nullable and _is_blank(text):
        return ABSENT

    if spec.kind is ValueKind.NUMERIC:
        parser = get_parser(spec.base)
        return parser(text)
    if spec.kind is ValueKind.IDENTIFIER:
        return parse_uuid(text)
    if spec.kind is ValueKind.ENUM:
        return parse_enum(text, spec.base)

    raise UnsupportedTypeError(f"Type not supported: {spec.target!r}")


def convert_group(group: Group, spec: ValueSpec) -> Any:
    """Convert a group into the value described by ``spec``.

    A group handle is returned as-is even when the group did not succeed;
    any other kind reports ABSENT for a failed group. Arrays hold one item
    per capture; every other kind reads the group's last capture.
    """
    if spec.kind is ValueKind.GROUP:
        return group
    if not group.succeeded:
        return ABSENT

    if spec.kind is ValueKind.ARRAY:
        item = spec.item
        values = []
        for capture in group.captures:
            value = convert_capture(capture, item)
            values.append(item.zero() if value is ABSENT else value)
        return values

    return convert_capture(group.capture, spec)


__all__ = ["convert_capture", "convert_group", "parse_enum", "parse_uuid"]
