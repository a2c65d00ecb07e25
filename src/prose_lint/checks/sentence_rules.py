"""Checks tied to sentence structure rather than single words."""

import re

from .base import PatternCheck

# Start of the text, end of a previous sentence, or a paragraph break.
# Each alternative begins only where a whitespace run starts.
SENTENCE_START = (
    r"(?:\A\s*"
    r"|(?<=[.!?])[\"')\]]?\s+"
    r"|(?<=\S)[ \t]*\n[ \t]*\n\s*)"
)


class LexicalIllusionCheck(PatternCheck):
    """Flags a word repeated back to back ("the the")."""

    name = "illusion"
    explanation = "is repeated"
    pattern = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)


class StartsWithSoCheck(PatternCheck):
    """Flags sentences that open with "so"."""

    name = "so"
    explanation = "adds no meaning"
    pattern = re.compile(SENTENCE_START + r"(?P<flagged>so)\b", re.IGNORECASE)


class ThereIsCheck(PatternCheck):
    """Flags sentences that open with "there is" or "there are"."""

    name = "thereIs"
    explanation = "is unnecessary verbiage"
    pattern = re.compile(
        SENTENCE_START + r"(?P<flagged>there\s+(?:is|are))\b", re.IGNORECASE
    )
