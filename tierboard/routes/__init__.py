"""API routes."""

from fastapi import APIRouter

from tierboard.routes import ratings

api_router = APIRouter()

# Rating submission and leaderboard
api_router.include_router(ratings.router, prefix="/api", tags=["ratings"])
