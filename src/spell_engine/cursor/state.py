"""Positions and cursors anchored to lines of the host document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .errors import InvalidLineCursor, InvalidOffsetOrder, InvalidWordCursor

CODE_CONTENT = "codeContent"
PREFORMATTED = "pre"


class BlockRef(Protocol):
    """Host-owned line block; the engine reads and rewrites ``text`` only."""

    key: str
    text: str
    function_type: Optional[str]
    lang: Optional[str]


@dataclass(slots=True)
class Position:
    key: str
    offset: int
    block: Optional[BlockRef] = None

    def copy(self, *, offset: Optional[int] = None) -> "Position":
        """Fresh position sharing only the non-owning ``block`` reference."""

        return Position(
            key=self.key,
            offset=self.offset if offset is None else offset,
            block=self.block,
        )


@dataclass(frozen=True, slots=True)
class Affiliation:
    """Structural context of a selection, e.g. ``Affiliation("pre")``."""

    type: str


@dataclass(slots=True)
class LineCursor:
    """Caret or selection as reported by the editing surface."""

    start: Position
    end: Position
    affiliation: Tuple[Affiliation, ...] = ()

    @classmethod
    def collapsed(cls, position: Position) -> "LineCursor":
        return cls(start=position.copy(), end=position.copy())

    @classmethod
    def on_line(
        cls,
        start: Position,
        end: Position,
        *,
        affiliation: Tuple[Affiliation, ...] = (),
    ) -> "LineCursor":
        cursor = cls(start=start, end=end, affiliation=affiliation)
        if start.key != end.key:
            raise InvalidLineCursor(
                f"Expected a single line cursor but got {start.key!r} and {end.key!r}.",
                cursor=cursor,
            )
        return cursor

    @property
    def is_single_line(self) -> bool:
        return self.start.key == self.end.key

    @property
    def is_collapsed(self) -> bool:
        return self.is_single_line and self.start.offset == self.end.offset

    def copy(self) -> "LineCursor":
        return LineCursor(
            start=self.start.copy(),
            end=self.end.copy(),
            affiliation=self.affiliation,
        )


@dataclass(slots=True)
class WordCursor:
    """Start/end pair covering exactly one word on one line."""

    start: Position
    end: Position

    @classmethod
    def spanning(cls, start: Position, end: Position) -> "WordCursor":
        cursor = cls(start=start, end=end)
        if start.key != end.key:
            raise InvalidWordCursor(
                f"Expected a single line word cursor but got {start.key!r} and {end.key!r}.",
                cursor=cursor,
            )
        if start.offset > end.offset:
            raise InvalidOffsetOrder(
                f"Invalid word cursor offset: {start.offset} is after {end.offset}.",
                cursor=cursor,
            )
        return cursor

    @property
    def length(self) -> int:
        return self.end.offset - self.start.offset


__all__ = [
    "Affiliation",
    "BlockRef",
    "CODE_CONTENT",
    "LineCursor",
    "PREFORMATTED",
    "Position",
    "WordCursor",
]
