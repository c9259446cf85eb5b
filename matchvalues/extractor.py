"""Regex-based extraction of typed values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import regex

from matchvalues.api import get, try_get


@dataclass
class RegexExtractor:
    """Extracts typed values using a regular expression pattern.

    The pattern is compiled with the ``regex`` engine, so ``list[...]``
    targets see every repetition of a group.

    Args:
        pattern: Regular expression pattern with optional named groups
        target: Type of the extracted value, e.g. ``tuple[int, str]``
        group_names: Groups to read, one per output value
        flags: ``regex`` compile flags
    """

    pattern: str
    target: Any = str
    group_names: tuple[str, ...] = field(default_factory=tuple)
    flags: int = 0

    def __post_init__(self) -> None:
        self.group_names = tuple(self.group_names)
        self._compiled = regex.compile(self.pattern, self.flags)

    def extract(self, text: str) -> Any:
        """Extract the value of the first match in ``text``.

        Raises:
            MatchFailedError: If pattern does not match
        """
        return get(self._compiled.search(text), self.target, *self.group_names)

    def try_extract(self, text: str) -> Any:
        """Like :meth:`extract`, but returns the absent value when nothing matches."""
        return try_get(self._compiled.search(text), self.target, *self.group_names)

    def extract_all(self, text: str) -> list[Any]:
        """Extract one value per non-overlapping match in ``text``."""
        return [
            get(match, self.target, *self.group_names)
            for match in self._compiled.finditer(text)
        ]

    def substitute(
        self, text: str, replacement: Callable[[Any], str], count: int = 0
    ) -> str:
        """Replace every match with ``replacement`` applied to its value."""
        return self._compiled.sub(
            lambda match: replacement(get(match, self.target, *self.group_names)),
            text,
            count=count,
        )


__all__ = ["RegexExtractor"]
