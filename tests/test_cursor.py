from __future__ import annotations

import pytest

from spell_engine.content import Block
from spell_engine.cursor import (
    Affiliation,
    InvalidLineCursor,
    InvalidOffsetOrder,
    InvalidWordCursor,
    LineCursor,
    Position,
    WordCursor,
    offset_to_word_cursor,
    validate_line_cursor,
)


def make_selection(
    text: str = "hello world",
    *,
    start: int = 0,
    end: int | None = None,
    end_key: str = "ag-0",
    block: Block | None = None,
    attach_block: bool = True,
    affiliation: tuple[Affiliation, ...] = (),
) -> LineCursor:
    owner = block or Block(key="ag-0", text=text)
    return LineCursor(
        start=Position(key="ag-0", offset=start, block=owner if attach_block else None),
        end=Position(key=end_key, offset=start if end is None else end),
        affiliation=affiliation,
    )


def test_offset_to_word_cursor_sets_offsets() -> None:
    line = make_selection(start=3, end=3)

    word = offset_to_word_cursor(line, 6, 11)

    assert (word.start.offset, word.end.offset) == (6, 11)
    assert word.start.key == word.end.key == "ag-0"
    assert word.start.block is line.start.block


def test_offset_to_word_cursor_does_not_alias_input() -> None:
    line = make_selection(start=3, end=3)

    word = offset_to_word_cursor(line, 6, 11)
    word.start.offset = 0
    word.end.offset = 1

    assert (line.start.offset, line.end.offset) == (3, 3)
    assert word.start is not line.start


def test_offset_to_word_cursor_does_not_validate() -> None:
    word = offset_to_word_cursor(make_selection(), 5, 2)

    assert (word.start.offset, word.end.offset) == (5, 2)


def test_line_cursor_on_line_rejects_two_lines() -> None:
    with pytest.raises(InvalidLineCursor):
        LineCursor.on_line(Position(key="ag-0", offset=0), Position(key="ag-1", offset=0))


def test_word_cursor_spanning_enforces_invariants() -> None:
    with pytest.raises(InvalidOffsetOrder):
        WordCursor.spanning(Position(key="ag-0", offset=5), Position(key="ag-0", offset=2))
    with pytest.raises(InvalidWordCursor):
        WordCursor.spanning(Position(key="ag-0", offset=0), Position(key="ag-1", offset=2))

    word = WordCursor.spanning(Position(key="ag-0", offset=2), Position(key="ag-0", offset=5))
    assert word.length == 3


def test_collapsed_cursor_copies_position() -> None:
    position = Position(key="ag-0", offset=4)

    caret = LineCursor.collapsed(position)

    assert caret.is_collapsed
    assert caret.start is not position
    assert caret.start is not caret.end


def test_validate_accepts_plain_paragraph() -> None:
    assert validate_line_cursor(make_selection(start=2, end=4)) is True


def test_validate_rejects_missing_selection() -> None:
    assert validate_line_cursor(None) is False


def test_validate_rejects_multiple_lines() -> None:
    assert validate_line_cursor(make_selection(end_key="ag-1")) is False


def test_validate_rejects_missing_block() -> None:
    assert validate_line_cursor(make_selection(attach_block=False)) is False


def test_validate_rejects_code_content_with_language() -> None:
    block = Block(key="ag-0", text="print(x)", function_type="codeContent", lang="python")

    assert validate_line_cursor(make_selection(block=block)) is False


def test_validate_accepts_code_content_without_language() -> None:
    block = Block(key="ag-0", text="plain", function_type="codeContent", lang=None)

    assert validate_line_cursor(make_selection(block=block)) is True


def test_validate_rejects_single_pre_affiliation() -> None:
    selection = make_selection(affiliation=(Affiliation("pre"),))

    assert validate_line_cursor(selection) is False


def test_validate_ignores_pre_among_several_affiliations() -> None:
    selection = make_selection(affiliation=(Affiliation("pre"), Affiliation("li")))

    assert validate_line_cursor(selection) is True
