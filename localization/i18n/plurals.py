"""Plural-range specifiers and candidate selection.

A plural-range specifier is the key of a plural form:

- ``"5"``: exactly 5
- ``"1,5"``: 1 through 5 inclusive
- ``"6,"``: 6 or more
- ``",5"``: 5 or less
- ``"-3,-1"``: negative bounds are allowed

Keys that do not follow this grammar match any count.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional

RANGE_PATTERN = re.compile(
    r"^(?P<lower>-?[0-9]+)?(?P<separator>,)?(?P<upper>-?[0-9]+)?$"
)


@dataclass(frozen=True)
class PluralRange:
    """Parsed plural-range specifier.

    Attributes:
        lower: The ``from`` bound, if present.
        upper: The ``to`` bound, if present.
        is_range: Whether the specifier holds a separator.
    """

    lower: Optional[int] = None
    upper: Optional[int] = None
    is_range: bool = False

    @classmethod
    def parse(cls, specifier: str) -> Optional["PluralRange"]:
        """Parse a specifier string.

        Args:
            specifier: Key of a plural form (e.g. "1,5").

        Returns:
            PluralRange, or None if the key does not follow the grammar.
        """
        match = RANGE_PATTERN.match(specifier)
        if match is None:
            return None

        lower = match.group("lower")
        upper = match.group("upper")
        return cls(
            lower=int(lower) if lower is not None else None,
            upper=int(upper) if upper is not None else None,
            is_range=match.group("separator") is not None,
        )

    def matches(self, plural: int, legacy_upper_bound: bool = False) -> bool:
        """Check whether a count falls within this range.

        Args:
            plural: Count to test.
            legacy_upper_bound: Compare an upper-bound-only range (",5")
                against the absent lower bound read as 0, instead of
                against the upper bound.

        Returns:
            True if the count matches.
        """
        if not self.is_range:
            return self.lower is not None and plural == self.lower

        if self.lower is not None and self.upper is not None:
            return self.lower <= plural <= self.upper

        if self.lower is not None:
            return plural >= self.lower

        if self.upper is not None:
            if legacy_upper_bound:
                return plural <= 0
            return plural <= self.upper

        # A lone separator bounds nothing
        return False


def select_candidate(
    candidates: Mapping[str, str],
    plural: int = 0,
    legacy_upper_bound: bool = False,
) -> Optional[str]:
    """Pick the first candidate whose specifier matches ``plural``.

    Candidates are checked in the order given; callers hand them over
    last-declared first. A key that is not a range specifier matches
    unconditionally.

    Args:
        candidates: Mapping of specifier to text, in checking order.
        plural: Count used for selection.
        legacy_upper_bound: See ``PluralRange.matches``.

    Returns:
        Text of the selected candidate, or None if nothing matched.
    """
    for specifier, text in candidates.items():
        plural_range = PluralRange.parse(str(specifier))
        if plural_range is None:
            return text
        if plural_range.matches(plural, legacy_upper_bound=legacy_upper_bound):
            return text
    return None
