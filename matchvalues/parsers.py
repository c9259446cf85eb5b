"""Primitive parser table.

Maps each numeric kind to a parser that reads invariant-culture literals:
ASCII digits only, optional sign, surrounding whitespace tolerated, no
grouping separators and no underscores. The table is built once, on first
use, and is read-only afterwards.
"""

from __future__ import annotations

import logging
import math
import re
import struct
import threading
from decimal import ROUND_HALF_EVEN, Context, Decimal
from types import MappingProxyType
from typing import Any, Callable, Mapping

from matchvalues.exceptions import FormatError, NumericOverflowError
from matchvalues.kinds import DECIMAL_MAX, SIZED_INTEGER_KINDS, Float32

logger = logging.getLogger(__name__)

Parser = Callable[[str], Any]

_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)\s*", re.ASCII)
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\s*",
    re.ASCII,
)
_FLOAT_SYMBOL_RE = re.compile(
    r"\s*(?P<sign>[+-]?)(?:(?P<inf>infinity|∞)|(?P<nan>nan))\s*",
    re.ASCII | re.IGNORECASE,
)
_DECIMAL_RE = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))\s*", re.ASCII)

# int() refuses strings longer than sys.get_int_max_str_digits()
_DIGIT_CHUNK = 4000

DECIMAL_MAX_SCALE = 28
_DECIMAL_STEP = Decimal(1).scaleb(-DECIMAL_MAX_SCALE)
_DECIMAL_WIDE = Context(prec=60, rounding=ROUND_HALF_EVEN)


def _literal_to_int(literal: str) -> int:
    """Convert a signed ASCII digit string of any length."""
    negative = literal.startswith("-")
    digits = literal.lstrip("+-").lstrip("0") or "0"
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if negative else value


def _parse_int(text: str) -> int:
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        raise FormatError(text, int)
    return _literal_to_int(match.group(1))


def _sized_int_parser(kind: type[int]) -> Parser:
    def parse(text: str) -> int:
        match = _INTEGER_RE.fullmatch(text)
        if match is None:
            raise FormatError(text, kind)
        digits = match.group(1).lstrip("+-").lstrip("0")
        if len(digits) > 20:
            raise NumericOverflowError(text, kind)
        value = _literal_to_int(match.group(1))
        if not kind.min_value <= value <= kind.max_value:  # type: ignore[attr-defined]
            raise NumericOverflowError(text, kind)
        return kind(value)

    return parse


def _read_float(text: str, kind: type) -> float:
    match = _FLOAT_RE.fullmatch(text)
    if match is not None:
        return float(match.group(1))
    symbol = _FLOAT_SYMBOL_RE.fullmatch(text)
    if symbol is None:
        raise FormatError(text, kind)
    if symbol.group("nan"):
        return math.nan
    return -math.inf if symbol.group("sign") == "-" else math.inf


def _parse_float(text: str) -> float:
    return _read_float(text, float)


def _parse_float32(text: str) -> Float32:
    value = _read_float(text, Float32)
    if math.isfinite(value):
        try:
            (value,) = struct.unpack("<f", struct.pack("<f", value))
        except OverflowError:
            value = math.copysign(math.inf, value)
    return Float32(value)


def _coefficient(value: Decimal) -> int:
    return int("".join(map(str, value.as_tuple().digits)))


def _fit_decimal(value: Decimal) -> Decimal:
    """Round to a 96-bit coefficient with at most 28 fractional digits."""
    if value.as_tuple().exponent < -DECIMAL_MAX_SCALE:
        value = value.quantize(_DECIMAL_STEP, context=_DECIMAL_WIDE)
    for precision in (29, 28):
        rounded = Context(prec=precision, rounding=ROUND_HALF_EVEN).plus(value)
        if _coefficient(rounded) <= DECIMAL_MAX:
            break
    if rounded.as_tuple().exponent > 0:
        rounded = rounded.quantize(Decimal(1), context=_DECIMAL_WIDE)
    return rounded


def _parse_decimal(text: str) -> Decimal:
    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise FormatError(text, Decimal)
    value = Decimal(match.group(1))
    if abs(value) >= DECIMAL_MAX + 1:
        raise NumericOverflowError(text, Decimal)
    value = _fit_decimal(value)
    if abs(value) > DECIMAL_MAX:
        raise NumericOverflowError(text, Decimal)
    return value


def _build_parser_table() -> dict[type, Parser]:
    parsers: dict[type, Parser] = {int: _parse_int}
    for kind in SIZED_INTEGER_KINDS:
        parsers[kind] = _sized_int_parser(kind)
    parsers[float] = _parse_float
    parsers[Float32] = _parse_float32
    parsers[Decimal] = _parse_decimal
    return parsers


_PARSERS: Mapping[type, Parser] | None = None
_PARSERS_LOCK = threading.Lock()


def get_parser_table() -> Mapping[type, Parser]:
    """Return the parser table, building it on first use."""
    table = _PARSERS
    if table is None:
        table = _initialize_parser_table()
    return table


def _initialize_parser_table() -> Mapping[type, Parser]:
    global _PARSERS
    with _PARSERS_LOCK:
        if _PARSERS is None:
            _PARSERS = MappingProxyType(_build_parser_table())
            logger.debug("Built primitive parser table with %d kinds", len(_PARSERS))
        return _PARSERS


def get_parser(kind: Any) -> Parser | None:
    """Return the parser for ``kind``, or None if it is not a numeric kind."""
    try:
        return get_parser_table().get(kind)
    except TypeError:
        # unhashable typing constructs are never numeric kinds
        return None


__all__ = ["Parser", "get_parser", "get_parser_table"]
