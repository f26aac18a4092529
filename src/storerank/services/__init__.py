"""Services package - import from subdirectories directly.

Subpackages:
- config: Leaderboard settings and data directory lookup
- data: Store/transaction models and JSON persistence
- leaderboard: Aggregation, ranking and display records
"""
