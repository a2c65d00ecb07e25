"""Map character offsets in a document to row and column positions."""

from bisect import bisect_right
from pathlib import Path

from .models import LineEntry, LineIndex, LocatedSuggestion, Location, Suggestion


def build_line_index(text: str) -> LineIndex:
    """Split text into lines and record the offset each line starts at.

    A trailing newline yields a final empty line, and empty text yields the
    single entry ``(0, "")``, so the index is never empty.

    Args:
        text: Full document text

    Returns:
        Line entries ordered by start offset
    """
    entries = []
    start = 0
    for line in text.split("\n"):
        entries.append(LineEntry(start, line))
        start += len(line) + 1
    return tuple(entries)


def locate(line_index: LineIndex, offset: int, adjustment: int = 0) -> Location:
    """Find the line containing an offset.

    The selected line is the last one starting at or before ``offset``: an
    offset on a line start belongs to that line, and offsets past every
    start belong to the last line. Offsets before the first line resolve to
    the first line. The column is not clamped.

    Args:
        line_index: Index built by build_line_index, sorted by start
        offset: 0-based character offset into the document
        adjustment: Added to the computed column

    Returns:
        Location with a 1-based row and 0-based column
    """
    i = max(bisect_right(line_index, offset, key=lambda entry: entry.start) - 1, 0)
    start, line_text = line_index[i]
    return Location(row=i + 1, column=offset - start + adjustment, line_text=line_text)


def locate_suggestions(
    file_path: Path, text: str, suggestions: list[Suggestion]
) -> list[LocatedSuggestion]:
    """Locate every suggestion for a document, preserving their order.

    Args:
        file_path: Path of the document the suggestions belong to
        text: Full document text the offsets refer to
        suggestions: Suggestions reported for the text

    Returns:
        One LocatedSuggestion per suggestion
    """
    line_index = build_line_index(text)
    located = []
    for suggestion in suggestions:
        location = locate(line_index, suggestion.offset, suggestion.adjustment)
        located.append(
            LocatedSuggestion(
                file=file_path,
                row=location.row,
                column=location.column,
                line_text=location.line_text,
                message=suggestion.message,
                check=suggestion.check,
            )
        )
    return located
