"""Lint prose and report suggestions by row and column."""

from .linter import ProseLinter
from .locator import build_line_index, locate, locate_suggestions
from .models import LineEntry, LocatedSuggestion, Location, Suggestion
from .pipeline import FileProcessingError, lint_paths

__all__ = [
    "FileProcessingError",
    "LineEntry",
    "LocatedSuggestion",
    "Location",
    "ProseLinter",
    "Suggestion",
    "build_line_index",
    "lint_paths",
    "locate",
    "locate_suggestions",
]
