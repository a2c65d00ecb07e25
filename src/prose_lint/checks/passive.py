"""Passive voice detection."""

import re

from ..constants import IRREGULAR_PARTICIPLES, PASSIVE_AUXILIARIES
from .base import PatternCheck


class PassiveCheck(PatternCheck):
    """Flags a form of "to be" followed by a past participle."""

    name = "passive"
    explanation = "may be passive voice"
    pattern = re.compile(
        r"\b(?:{aux})\b\s+(?:\w+ed|{irregular})\b".format(
            aux="|".join(PASSIVE_AUXILIARIES),
            irregular="|".join(IRREGULAR_PARTICIPLES),
        ),
        re.IGNORECASE,
    )
