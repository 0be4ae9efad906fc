"""Tierboard - tier ratings and Top-10 leaderboard service."""
