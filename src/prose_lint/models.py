"""Data models for suggestions and their source locations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple


class LineEntry(NamedTuple):
    """One line of a document and the offset it starts at."""

    start: int  # Characters before this line, newlines included
    text: str


LineIndex = tuple[LineEntry, ...]


@dataclass(frozen=True)
class Suggestion:
    """A single issue reported by a prose check."""

    offset: int  # 0-based start of the flagged text
    adjustment: int  # Length of the flagged text, added to the column
    message: str  # e.g. '"very" is a weasel word'
    check: str = ""  # Name of the check, e.g. "weasel"


@dataclass(frozen=True)
class Location:
    """Row and column of an offset within a document."""

    row: int  # 1-based
    column: int  # 0-based, adjustment included
    line_text: str


@dataclass(frozen=True)
class LocatedSuggestion:
    """A suggestion enriched with its row and column."""

    file: Path
    row: int
    column: int
    line_text: str
    message: str
    check: str = ""

    def to_dict(self) -> dict:
        """Serialize using the record keys of the JSON output."""
        return {
            "file": str(self.file),
            "row": self.row,
            "column": self.column,
            "content": self.line_text,
            "reason": self.message,
            "check": self.check,
        }


@dataclass
class FileReport:
    """All located suggestions for one file, in linter order."""

    file: Path
    suggestions: list[LocatedSuggestion] = field(default_factory=list)


@dataclass
class RunSummary:
    """Totals for a completed lint run."""

    files: int = 0
    suggestions: int = 0
