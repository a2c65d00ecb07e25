"""Tests for mapping offsets to rows and columns."""

from pathlib import Path

from prose_lint.locator import build_line_index, locate, locate_suggestions
from prose_lint.models import LineEntry, Location, Suggestion


def test_builds_index_with_cumulative_starts():
    """Test that each line records the characters before it."""
    index = build_line_index("abc\ndef\n")

    assert index == (LineEntry(0, "abc"), LineEntry(4, "def"), LineEntry(8, ""))


def test_empty_document_has_one_line():
    """Test that the index is never empty."""
    assert build_line_index("") == (LineEntry(0, ""),)


def test_blank_lines_are_kept():
    """Test that consecutive newlines produce empty lines."""
    index = build_line_index("a\n\nb")

    assert [entry.start for entry in index] == [0, 2, 3]
    assert [entry.text for entry in index] == ["a", "", "b"]


def test_locates_offset_inside_second_line():
    """Test the basic two-line lookup."""
    index = build_line_index("abc\ndef\n")

    assert locate(index, 5) == Location(row=2, column=1, line_text="def")


def test_offset_zero_is_first_row():
    """Test that offset 0 is row 1 with the adjustment as column."""
    index = build_line_index("abc\ndef\n")

    assert locate(index, 0) == Location(row=1, column=0, line_text="abc")
    assert locate(index, 0, 3) == Location(row=1, column=3, line_text="abc")


def test_offset_on_line_start_selects_that_line():
    """Test that a line's exact start belongs to that line, not the previous one."""
    index = build_line_index("abc\ndef\n")

    assert locate(index, 4).row == 2
    assert locate(index, 4).column == 0


def test_newline_character_belongs_to_its_line():
    """Test that the newline ending a line stays on that line."""
    index = build_line_index("abc\ndef\n")

    assert locate(index, 3) == Location(row=1, column=3, line_text="abc")


def test_offset_past_last_start_selects_last_line():
    """Test offsets at or beyond the final line start."""
    index = build_line_index("abc\ndef")

    assert locate(index, 7) == Location(row=2, column=3, line_text="def")
    assert locate(index, 50).row == 2


def test_offset_before_first_line_selects_first_line():
    """Test that a negative offset resolves to row 1."""
    index = build_line_index("abc\ndef")

    assert locate(index, -1).row == 1


def test_adjustment_is_not_clamped():
    """Test that the column may leave the line when the adjustment pushes it."""
    index = build_line_index("abc\ndef")

    assert locate(index, 4, -2).column == -2
    assert locate(index, 4, 10).column == 10


def test_every_offset_has_a_valid_row():
    """Test that all offsets in a document map to an existing row."""
    text = "first line\n\nthird line\nlast"
    index = build_line_index(text)

    for offset in range(len(text) + 1):
        location = locate(index, offset)
        assert 1 <= location.row <= len(index)
        assert 0 <= location.column <= len(location.line_text)
        assert locate(index, offset) == location


def test_locate_suggestions_keeps_order_and_adds_adjustment():
    """Test locating a list of suggestions for one file."""
    text = "This is very good.\nIt was done."
    suggestions = [
        Suggestion(offset=8, adjustment=4, message='"very" is a weasel word', check="weasel"),
        Suggestion(offset=22, adjustment=8, message='"was done" may be passive voice', check="passive"),
    ]

    located = locate_suggestions(Path("doc.md"), text, suggestions)

    assert [(s.row, s.column) for s in located] == [(1, 12), (2, 11)]
    assert located[0].line_text == "This is very good."
    assert located[1].line_text == "It was done."
    assert located[1].message == '"was done" may be passive voice'
    assert located[1].check == "passive"
    assert all(s.file == Path("doc.md") for s in located)


def test_no_suggestions_locates_nothing():
    """Test that a document without suggestions yields no records."""
    assert locate_suggestions(Path("doc.md"), "Plain text.", []) == []
