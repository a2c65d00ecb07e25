"""Prose checks run by the linter, keyed by name."""

from .base import PatternCheck
from .passive import PassiveCheck
from .sentence_rules import LexicalIllusionCheck, StartsWithSoCheck, ThereIsCheck
from .word_rules import (
    AdverbCheck,
    ClicheCheck,
    EPrimeCheck,
    TooWordyCheck,
    WeaselWordCheck,
)

CHECKS: dict[str, type[PatternCheck]] = {
    check.name: check
    for check in (
        PassiveCheck,
        LexicalIllusionCheck,
        StartsWithSoCheck,
        ThereIsCheck,
        WeaselWordCheck,
        AdverbCheck,
        TooWordyCheck,
        ClicheCheck,
        EPrimeCheck,
    )
}

__all__ = ["CHECKS", "PatternCheck"]
