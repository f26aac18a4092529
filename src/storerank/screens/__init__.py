"""Screens package - contains all screen definitions.

Screens:
- LeaderboardScreen: Ranked stores with podium, table and filters
"""

from storerank.screens.leaderboard import LeaderboardScreen

__all__ = ["LeaderboardScreen"]
