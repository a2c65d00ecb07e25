"""Lint result reporters."""

import json

from rich.console import Console
from rich.markup import escape

from .models import LocatedSuggestion


class SuggestionReporter:
    """Format located suggestions as they arrive."""

    FORMATS = ("console", "json")

    def __init__(self, output_format: str = "console", console: Console | None = None):
        """Initialize the reporter.

        Args:
            output_format: "console" for rich text, "json" for one object per line
            console: Console records are written to (default: standard output)
        """
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)

    def report(self, located: LocatedSuggestion) -> None:
        """Write a single located suggestion.

        Only the location is styled; the message and line text are written
        unchanged so columns line up with the file's own characters.

        Args:
            located: Suggestion to write
        """
        if self.output_format == "json":
            print(json.dumps(located.to_dict()), file=self.console.file, flush=True)
            return

        self.console.print(
            f"[bold]{escape(str(located.file))}[/bold]:{located.row}:{located.column}",
            end="",
        )
        suffix = f" ({located.check})" if located.check else ""
        print(
            f"  {located.message}{suffix}\n    {located.line_text}",
            file=self.console.file,
            flush=True,
        )
