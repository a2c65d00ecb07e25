"""Shared machinery for regex-driven prose checks."""

import re
from collections.abc import Iterable

from ..models import Suggestion


def word_pattern(words: Iterable[str]) -> re.Pattern:
    """Compile a case-insensitive, word-bounded pattern for a word list.

    Longer entries are tried first so multi-word phrases win over their
    prefixes, and spaces inside phrases match any run of whitespace.
    """
    alternatives = sorted(set(words), key=len, reverse=True)
    body = "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in alternatives)
    return re.compile(rf"\b(?:{body})\b", re.IGNORECASE)


class PatternCheck:
    """A prose check that flags every match of a regular expression.

    Subclasses set ``name``, ``explanation`` and ``pattern``. When the
    pattern defines a ``flagged`` group, only that group is reported.
    """

    name: str = ""
    explanation: str = ""
    pattern: re.Pattern

    def check(self, text: str) -> list[Suggestion]:
        """Find every occurrence of the pattern in text.

        Args:
            text: Full document text

        Returns:
            Suggestions in order of appearance
        """
        suggestions = []
        for match in self.pattern.finditer(text):
            if "flagged" in self.pattern.groupindex:
                start, end = match.span("flagged")
            else:
                start, end = match.span()
            suggestions.append(
                Suggestion(
                    offset=start,
                    adjustment=end - start,
                    message=f'"{text[start:end]}" {self.explanation}',
                    check=self.name,
                )
            )
        return suggestions
