"""Splice a single word of a line block and notify the host document."""

from __future__ import annotations

from typing import Optional

from spell_engine.cursor import (
    LineCursor,
    WordCursor,
    ensure_word_cursor,
    offset_to_word_cursor,
    validate_line_cursor,
)
from spell_engine.runtime import telemetry
from spell_engine.text import extract_word

from .host import DocumentHost


class ReplacementEngine:
    """Replaces words inside the lines of a :class:`DocumentHost`.

    ``cursor`` is the document's active cursor as last set by the engine.
    """

    def __init__(self, host: DocumentHost, *, cursor: Optional[LineCursor] = None) -> None:
        self.host = host
        self.cursor = cursor

    def current_selection(self) -> Optional[LineCursor]:
        """Copy of the live selection with its owning block attached to ``start``."""

        selection = self.host.get_cursor_range()
        if selection is None:
            return None
        selection = selection.copy()
        selection.start.block = self.host.get_block(selection.start.key)
        return selection

    def replace_word_inline(
        self,
        line: LineCursor,
        word_cursor: WordCursor,
        replacement: str,
        set_cursor: bool = False,
    ) -> None:
        """Replace the ``word_cursor`` range of ``line`` with ``replacement``.

        ``line`` must reference the line that contains the word (``"abc >foo< abc"``
        where ``>``/``<`` are the word cursor ends). Malformed cursors raise a
        :class:`~spell_engine.cursor.WordCursorError` before anything changes.
        With ``set_cursor`` the caret collapses right after the replacement.
        """

        with telemetry.span(
            "content::replace_word_inline",
            component=True,
            metadata={"key": line.start.key},
        ):
            block = line.start.block or self.host.get_block(line.start.key)
            ensure_word_cursor(line, word_cursor, block)
            assert block is not None

            left = word_cursor.start.offset
            right = word_cursor.end.offset
            block.text = block.text[:left] + replacement + block.text[right:]

            if set_cursor:
                caret = word_cursor.start.copy(offset=left + len(replacement))
                line.start = caret
                line.end = caret.copy()
                self.cursor = LineCursor.collapsed(caret)
                self.host.set_cursor(self.cursor)

            self.host.partial_render(line)
            self.host.dispatch_selection_change()
            self.host.dispatch_change()

    def replace_current_word_unsafe(self, word: str, replacement: str) -> bool:
        """Replace ``word`` at the live selection with ``replacement``.

        Unsafe because the selection must sit on exactly ``word``, as it does
        when the platform spell checker selected the misspelling. Stale or
        ineligible selections return ``False`` without touching the text.
        """

        selection = self.current_selection()
        if selection is None or not validate_line_cursor(selection):
            telemetry.record_event(
                "replace.ineligible",
                level="warning",
                data={"word": word, "selection": selection},
            )
            return False

        block = selection.start.block
        assert block is not None
        span = extract_word(block.text, selection.start.offset)
        if span is None:
            telemetry.record_event(
                "replace.no_word",
                level="debug",
                data={"word": word, "offset": selection.start.offset},
            )
            return False
        if span.word != word:
            telemetry.record_event(
                "replace.mismatch",
                level="warning",
                data={"expected": word, "found": span.word},
            )
            return False

        word_cursor = offset_to_word_cursor(selection, span.left, span.right)
        self.replace_word_inline(selection, word_cursor, replacement, set_cursor=True)
        return True


__all__ = ["ReplacementEngine"]
