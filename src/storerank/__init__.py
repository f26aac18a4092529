"""StoreRank - store leaderboard by revenue, orders and growth."""

__version__ = "0.1.0"
