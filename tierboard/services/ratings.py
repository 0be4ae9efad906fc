"""Rating submission and leaderboard service.

Routers call these functions; they own the load -> merge -> save sequence
and turn store failures into request-level errors.
"""

from collections.abc import Mapping
import logging

from tierboard.errors import InternalError, ValidationError
from tierboard.schemas import RankingEntry
from tierboard.services.ranking import rank_tallies
from tierboard.services.tiers import empty_tally, parse_tier
from tierboard.stores.ratings_file import Tallies, TallyFileStore, TallyStoreError

logger = logging.getLogger("uvicorn.error")

MSG_EMPTY_RATINGS = "ratings data must not be empty"
MSG_SUBMIT_FAILED = "Server error, submission failed"
MSG_RANKINGS_FAILED = "Failed to load rankings"
MSG_CLEAR_FAILED = "Failed to clear data"


def merge_ratings(tallies: Mapping[str, Mapping[str, int]], ratings: Mapping[str, object]) -> Tallies:
    """Merge one user's ratings into the tally mapping.

    Every tier is validated before anything is counted, so a submission is
    applied in full or not at all. The input mapping is not modified.

    Args:
        tallies: Current item -> tally record mapping.
        ratings: Item -> tier symbol.

    Returns:
        New tally mapping with one increment per rated item.

    Raises:
        InvalidTier: If any tier symbol is outside S/A/B/C/D.
    """
    parsed = [(item, parse_tier(item, tier)) for item, tier in ratings.items()]

    merged: Tallies = {item: dict(record) for item, record in tallies.items()}
    for item, tier in parsed:
        record = merged.setdefault(item, empty_tally())
        record[tier.value] += 1
    return merged


def submit_ratings(store: TallyFileStore, ratings: object) -> int:
    """Record one submission.

    Returns:
        Number of items rated.

    Raises:
        ValidationError: If ratings is missing, empty or not a mapping.
        InvalidTier: If any tier symbol is invalid (nothing is saved).
        InternalError: If the store cannot be read or written.
    """
    if not ratings:
        raise ValidationError(MSG_EMPTY_RATINGS)
    if not isinstance(ratings, Mapping):
        raise ValidationError("ratings data must be a JSON object")

    try:
        store.update(lambda tallies: merge_ratings(tallies, ratings))
    except TallyStoreError as e:
        logger.exception("Failed to submit ratings")
        raise InternalError(MSG_SUBMIT_FAILED) from e

    logger.info(f"Ratings submitted: {len(ratings)} items")
    return len(ratings)


def get_rankings(store: TallyFileStore) -> list[RankingEntry]:
    """Load the store and return the Top-10 leaderboard."""
    try:
        tallies = store.load()
    except TallyStoreError as e:
        logger.exception("Failed to load rankings")
        raise InternalError(MSG_RANKINGS_FAILED) from e
    return rank_tallies(tallies)


def clear_ratings(store: TallyFileStore) -> None:
    """Reset the store to an empty mapping."""
    try:
        store.clear()
    except TallyStoreError as e:
        logger.exception("Failed to clear ratings")
        raise InternalError(MSG_CLEAR_FAILED) from e
    logger.info("Ratings cleared")
