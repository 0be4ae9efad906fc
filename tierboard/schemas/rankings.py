"""Schemas for the rankings endpoint (/api/rankings)."""

from pydantic import BaseModel, Field


class TierStats(BaseModel):
    """Per-tier rating counts for one item."""

    S: int = Field(default=0, ge=0)
    A: int = Field(default=0, ge=0)
    B: int = Field(default=0, ge=0)
    C: int = Field(default=0, ge=0)
    D: int = Field(default=0, ge=0)


class RankingEntry(BaseModel):
    """A single item on the leaderboard."""

    skin: str
    total_score: int = Field(alias="totalScore", ge=0)
    stats: TierStats

    model_config = {"populate_by_name": True}


class RankingsResponse(BaseModel):
    """Response payload for GET /api/rankings."""

    success: bool = True
    data: list[RankingEntry] = Field(max_length=10)
