"""Widgets package - custom widgets for storerank.

- podium_place.py: One of the three top-ranked podium slots
"""

from storerank.widgets.podium_place import PodiumPlace

__all__ = [
    "PodiumPlace",
]
