"""Pydantic schemas for API request/response validation."""

from tierboard.schemas.common import MessageResponse
from tierboard.schemas.rankings import RankingEntry, RankingsResponse, TierStats

__all__ = [
    "MessageResponse",
    "RankingEntry",
    "RankingsResponse",
    "TierStats",
]
