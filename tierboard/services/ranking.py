"""Ranking service for the Top-10 leaderboard.

Ranking logic:
1. Score each item: S*5 + A*4 + B*3 + C*2 + D*1
2. Sort by total score DESC
3. Then by item name ASC (ties are ordered the same way on every call)
4. Return <= 10 entries

Pure functions over an already-loaded tally mapping; no I/O here.
"""

from collections.abc import Mapping

from tierboard.schemas import RankingEntry, TierStats
from tierboard.services.tiers import TIER_SCORES

LEADERBOARD_SIZE = 10


def calculate_total_score(stats: Mapping[str, int]) -> int:
    """Weighted sum of tier counts.

    Args:
        stats: Tally record keyed by tier symbol.

    Returns:
        Total score.
    """
    return sum(stats.get(tier.value, 0) * weight for tier, weight in TIER_SCORES.items())


def rank_tallies(
    tallies: Mapping[str, Mapping[str, int]],
    limit: int = LEADERBOARD_SIZE,
) -> list[RankingEntry]:
    """Build the leaderboard from the full tally mapping.

    Args:
        tallies: Item name -> tally record.
        limit: Maximum number of entries to return (default 10, max 10).

    Returns:
        List of RankingEntry, sorted by total score DESC, item name ASC.
    """
    entries = [
        RankingEntry(
            skin=item,
            total_score=calculate_total_score(stats),
            stats=TierStats(**stats),
        )
        for item, stats in tallies.items()
    ]
    entries.sort(key=lambda entry: (-entry.total_score, entry.skin))
    return entries[: min(limit, LEADERBOARD_SIZE)]
