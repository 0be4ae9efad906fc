"""Tier symbols and their score weights.

S is the highest tier and D the lowest. A tally record always holds one
counter per tier, keyed by the tier symbol.
"""

from enum import Enum

from tierboard.errors import InvalidTier


class Tier(str, Enum):
    """Rating tier."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"


# Score weight per tier
TIER_SCORES = {
    Tier.S: 5,
    Tier.A: 4,
    Tier.B: 3,
    Tier.C: 2,
    Tier.D: 1,
}

TIER_SYMBOLS = tuple(tier.value for tier in Tier)


def empty_tally() -> dict[str, int]:
    """Return a tally record with every counter at zero."""
    return {symbol: 0 for symbol in TIER_SYMBOLS}


def parse_tier(item: str, value: object) -> Tier:
    """Validate a submitted tier symbol.

    Symbols are matched exactly (no case folding or trimming).

    Raises:
        InvalidTier: If value is not one of S, A, B, C, D.
    """
    if not isinstance(value, str) or value not in TIER_SYMBOLS:
        raise InvalidTier(item, value)
    return Tier(value)
