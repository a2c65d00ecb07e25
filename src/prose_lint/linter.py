"""Main linter orchestrating all prose checks."""

from collections.abc import Iterable

from common.logger import get_logger

from .checks import CHECKS
from .constants import DISABLED_BY_DEFAULT
from .models import Suggestion

logger = get_logger(__name__)


class ProseLinter:
    """Run the enabled prose checks over a document."""

    def __init__(
        self,
        enabled: Iterable[str] | None = None,
        disabled: Iterable[str] | None = None,
        whitelist: Iterable[str] | None = None,
    ):
        """Initialize the linter.

        Args:
            enabled: Check names to turn on in addition to the defaults
            disabled: Check names to turn off
            whitelist: Text that is never reported, compared case-insensitively

        Raises:
            ValueError: If a check name is unknown
        """
        enabled = set(enabled or ())
        disabled = set(disabled or ())

        unknown = sorted((enabled | disabled) - CHECKS.keys())
        if unknown:
            raise ValueError(f"Unknown check(s): {', '.join(unknown)}")

        active = (set(CHECKS) - DISABLED_BY_DEFAULT) | enabled
        active -= disabled

        # Keep registry order so results for equal offsets are stable
        self.checks = [check() for name, check in CHECKS.items() if name in active]
        self.whitelist = {w.lower() for w in whitelist or ()}

        logger.debug(f"Active checks: {', '.join(c.name for c in self.checks)}")

    def lint(self, text: str) -> list[Suggestion]:
        """Lint a document.

        Suggestions covering the same span are merged into the first one,
        and the result is ordered by offset.

        Args:
            text: Full document text

        Returns:
            Suggestions ordered by offset
        """
        merged: dict[tuple[int, int], Suggestion] = {}

        for check in self.checks:
            for suggestion in check.check(text):
                flagged = text[suggestion.offset : suggestion.offset + suggestion.adjustment]
                if flagged.lower() in self.whitelist:
                    continue

                key = (suggestion.offset, suggestion.adjustment)
                first = merged.get(key)
                if first is None:
                    merged[key] = suggestion
                else:
                    merged[key] = Suggestion(
                        offset=first.offset,
                        adjustment=first.adjustment,
                        message=f"{first.message} and {check.explanation}",
                        check=f"{first.check},{suggestion.check}",
                    )

        return sorted(merged.values(), key=lambda s: s.offset)
