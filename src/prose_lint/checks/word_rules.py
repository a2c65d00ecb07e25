"""Checks that flag entries from a fixed word list."""

from ..constants import ADVERBS, CLICHES, EPRIME_WORDS, WEASEL_WORDS, WORDY_PHRASES
from .base import PatternCheck, word_pattern


class WeaselWordCheck(PatternCheck):
    name = "weasel"
    explanation = "is a weasel word"
    pattern = word_pattern(WEASEL_WORDS)


class AdverbCheck(PatternCheck):
    name = "adverb"
    explanation = "can weaken meaning"
    pattern = word_pattern(ADVERBS)


class TooWordyCheck(PatternCheck):
    name = "tooWordy"
    explanation = "is wordy or unneeded"
    pattern = word_pattern(WORDY_PHRASES)


class ClicheCheck(PatternCheck):
    name = "cliches"
    explanation = "is a cliche"
    pattern = word_pattern(CLICHES)


class EPrimeCheck(PatternCheck):
    """Flags every form of "to be" (off unless enabled)."""

    name = "eprime"
    explanation = 'is a form of "to be"'
    pattern = word_pattern(EPRIME_WORDS)
