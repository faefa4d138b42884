"""In-memory document host keyed by line block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from spell_engine.cursor import Affiliation, LineCursor, Position

RENDER = "render"
SELECTION_CHANGE = "selection-change"
CHANGE = "change"


@dataclass(slots=True)
class Block:
    key: str
    text: str = ""
    function_type: Optional[str] = None
    lang: Optional[str] = None


class EventBus:
    """Minimal event bus for render/selection/content notifications."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, ())):
            callback(payload)


class BlockDocument:
    """Ordered line blocks plus the active selection of an editing surface.

    Every ``dispatch_change`` bumps ``version`` so listeners (persistence,
    undo tracking) can tell content revisions apart.
    """

    def __init__(
        self, blocks: Iterable[Block] = (), *, bus: Optional[EventBus] = None
    ) -> None:
        self._blocks: Dict[str, Block] = {}
        self._order: List[str] = []
        for block in blocks:
            self.add_block(block)
        self.bus = bus or EventBus()
        self.selection: Optional[LineCursor] = None
        self.version = 0
        self.dirty = False

    @classmethod
    def from_lines(cls, lines: Sequence[str], *, prefix: str = "ag-") -> "BlockDocument":
        return cls(Block(key=f"{prefix}{index}", text=line) for index, line in enumerate(lines))

    def add_block(self, block: Block) -> None:
        if block.key not in self._blocks:
            self._order.append(block.key)
        self._blocks[block.key] = block

    def get_block(self, key: str) -> Optional[Block]:
        return self._blocks.get(key)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._blocks[key].text for key in self._order)

    def select(
        self,
        key: str,
        start: int,
        end: Optional[int] = None,
        *,
        end_key: Optional[str] = None,
        affiliation: Tuple[Affiliation, ...] = (),
    ) -> LineCursor:
        """Place the selection as the editing surface would report it."""

        self.selection = LineCursor(
            start=Position(key=key, offset=start),
            end=Position(key=end_key or key, offset=start if end is None else end),
            affiliation=affiliation,
        )
        return self.selection

    def get_cursor_range(self) -> Optional[LineCursor]:
        return self.selection.copy() if self.selection is not None else None

    def set_cursor(self, cursor: LineCursor) -> None:
        self.selection = cursor.copy()

    def partial_render(self, region: Optional[LineCursor] = None) -> None:
        self.bus.emit(RENDER, region)

    def dispatch_selection_change(self) -> None:
        self.bus.emit(SELECTION_CHANGE, self.get_cursor_range())

    def dispatch_change(self) -> None:
        self.version += 1
        self.dirty = True
        self.bus.emit(CHANGE, self.version)


__all__ = ["Block", "BlockDocument", "CHANGE", "EventBus", "RENDER", "SELECTION_CHANGE"]
