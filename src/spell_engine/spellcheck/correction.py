"""Glue between the spell checker and the replacement engine.

Provider lookups are awaited up front; the replacement itself runs
synchronously so the splice and its notifications are one unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from spell_engine.content import ReplacementEngine
from spell_engine.cursor import validate_line_cursor
from spell_engine.runtime import telemetry
from spell_engine.text import WordSpan, extract_word

from .checker import SpellChecker


@dataclass(slots=True)
class CorrectionCandidate:
    span: WordSpan
    misspelled: bool
    suggestions: List[str] = field(default_factory=list)

    @property
    def word(self) -> str:
        return self.span.word


async def inspect_caret(
    engine: ReplacementEngine, checker: SpellChecker
) -> Optional[CorrectionCandidate]:
    """Describe the word under the live caret, or ``None`` if there is none."""

    selection = engine.current_selection()
    if selection is None or not validate_line_cursor(selection):
        return None
    block = selection.start.block
    assert block is not None

    span = extract_word(block.text, selection.start.offset)
    if span is None:
        return None
    if not checker.is_misspelled(span.word):
        return CorrectionCandidate(span=span, misspelled=False)
    suggestions = await checker.get_word_suggestion(span.word)
    return CorrectionCandidate(span=span, misspelled=True, suggestions=suggestions)


def apply_correction(
    engine: ReplacementEngine, candidate: CorrectionCandidate, replacement: str
) -> bool:
    return engine.replace_current_word_unsafe(candidate.word, replacement)


def replace_misspelling(engine: ReplacementEngine, payload: Mapping[str, str]) -> bool:
    """Handle a host ``{"word": ..., "replacement": ...}`` message."""

    word = payload.get("word")
    replacement = payload.get("replacement")
    if not word or replacement is None:
        telemetry.record_event(
            "replace.bad_payload", level="warning", data={"payload": dict(payload)}
        )
        return False
    return engine.replace_current_word_unsafe(word, replacement)


__all__ = [
    "CorrectionCandidate",
    "apply_correction",
    "inspect_caret",
    "replace_misspelling",
]
