"""Capabilities the engine needs from the document that owns the text."""

from __future__ import annotations

from typing import Optional, Protocol

from spell_engine.cursor import BlockRef, LineCursor


class DocumentHost(Protocol):
    """Protocol describing how the engine reads and notifies the host document."""

    def get_block(self, key: str) -> Optional[BlockRef]:
        """Return the block owning line ``key`` or ``None`` if it is gone."""
        ...

    def get_cursor_range(self) -> Optional[LineCursor]:
        """Return the live selection of the editing surface."""
        ...

    def set_cursor(self, cursor: LineCursor) -> None:
        """Adopt ``cursor`` as the active caret."""
        ...

    def partial_render(self, region: Optional[LineCursor] = None) -> None:
        ...

    def dispatch_selection_change(self) -> None:
        ...

    def dispatch_change(self) -> None:
        ...


__all__ = ["DocumentHost"]
