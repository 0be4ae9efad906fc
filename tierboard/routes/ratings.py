"""Rating endpoints.

POST /api/submit     - Record one user's tier ratings
GET  /api/rankings   - Top-10 leaderboard
POST /api/clear-test - Reset all ratings (testing/maintenance)

Routers are thin: call services for business logic. Handlers are plain
functions so the blocking file I/O runs in the worker thread pool.
"""

from typing import Any

from fastapi import APIRouter, Body

from tierboard.schemas import MessageResponse, RankingsResponse
from tierboard.services.ratings import clear_ratings, get_rankings, submit_ratings
from tierboard.stores.ratings_file import get_store

router = APIRouter()


@router.post("/submit", response_model=MessageResponse)
def submit(
    ratings: Any = Body(
        default=None,
        examples=[{"RGX 11z Pro": "S", "Prime": "A"}],
    ),
) -> MessageResponse:
    """Submit tier ratings, one tier (S/A/B/C/D) per item."""
    submit_ratings(get_store(), ratings)
    return MessageResponse(success=True, msg="Ratings submitted successfully")


@router.get("/rankings", response_model=RankingsResponse)
def rankings() -> RankingsResponse:
    """Get the Top-10 items by total score."""
    return RankingsResponse(success=True, data=get_rankings(get_store()))


@router.post("/clear-test", response_model=MessageResponse)
def clear_test() -> MessageResponse:
    """Clear all ratings. No confirmation or access control."""
    clear_ratings(get_store())
    return MessageResponse(success=True, msg="Test data cleared")
