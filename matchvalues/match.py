"""Read-only view over a regular expression match.

Both the stdlib ``re`` engine and the third-party ``regex`` engine are
supported. Only ``regex`` records every repetition of a group; with ``re`` a
successful group always has exactly one capture (the last repetition).
A failed match is represented by ``None``, as returned by ``re.match``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Capture:
    """One occurrence of a group in the input text."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Group:
    """A capturing group with every capture it recorded, in order.

    ``index`` is -1 and ``succeeded`` is False for a group that was looked up
    by an unknown name.
    """

    index: int
    name: str | None
    succeeded: bool
    captures: tuple[Capture, ...] = field(default=(), repr=False)

    @property
    def capture(self) -> Capture | None:
        """The last capture, used when the group is read as a single value."""
        return self.captures[-1] if self.captures else None

    @property
    def text(self) -> str:
        capture = self.capture
        return capture.text if capture is not None else ""

    @property
    def start(self) -> int:
        capture = self.capture
        return capture.start if capture is not None else -1

    @property
    def end(self) -> int:
        capture = self.capture
        return capture.end if capture is not None else -1


class MatchResult:
    """Adapter exposing success, groups and captures of an engine match."""

    def __init__(self, match: Any | None) -> None:
        self._match = match
        if match is None:
            self._group_count = 1
            self._names: dict[int, str] = {}
            self._indexes: dict[str, int] = {}
        else:
            self._group_count = match.re.groups + 1
            self._indexes = dict(match.re.groupindex)
            self._names = {index: name for name, index in self._indexes.items()}
        self._multi_capture = callable(getattr(match, "captures", None))

    @classmethod
    def of(cls, match: Any | None) -> MatchResult:
        """Wrap ``match`` unless it already is a MatchResult."""
        if isinstance(match, MatchResult):
            return match
        if match is not None and not (
            hasattr(match, "re") and hasattr(match, "group") and hasattr(match, "span")
        ):
            raise TypeError(
                f"Expected a regular expression match or None, got {type(match).__name__}"
            )
        return cls(match)

    @property
    def succeeded(self) -> bool:
        return self._match is not None

    @property
    def group_count(self) -> int:
        """Number of groups including group 0 (the whole match)."""
        return self._group_count

    @property
    def raw(self) -> Any | None:
        """The underlying engine match object."""
        return self._match

    def group(self, key: int | str) -> Group:
        """Return the group at ``key``; unknown keys give a failed group."""
        index = self._index_of(key)
        if index is None:
            name = key if isinstance(key, str) else None
            return Group(index=-1, name=name, succeeded=False)
        name = self._names.get(index)
        if self._match is None:
            return Group(index=index, name=name, succeeded=False)
        captures = self._captures(index)
        return Group(index=index, name=name, succeeded=bool(captures), captures=captures)

    def groups(self) -> list[Group]:
        return [self.group(index) for index in range(self._group_count)]

    def _index_of(self, key: int | str) -> int | None:
        if isinstance(key, str):
            if key.isascii() and key.isdigit():
                key = int(key)
            else:
                return self._indexes.get(key)
        if 0 <= key < self._group_count:
            return key
        return None

    def _captures(self, index: int) -> tuple[Capture, ...]:
        match = self._match
        if self._multi_capture:
            return tuple(
                Capture(text, start, end)
                for text, start, end in zip(
                    match.captures(index), match.starts(index), match.ends(index)
                )
            )
        text = match.group(index)
        if text is None:
            return ()
        start, end = match.span(index)
        return (Capture(text, start, end),)

    def __repr__(self) -> str:
        return f"MatchResult({self._match!r})"


__all__ = ["Capture", "Group", "MatchResult"]
