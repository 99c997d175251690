"""SRS core (SM-2 item state + validated quality grades)."""

from .quality import Grade, InvalidQuality, Quality
from .sm2 import DEFAULT_EASINESS, MAX_INTERVAL, MIN_EASINESS, Item, review

__all__ = [
    "Grade",
    "InvalidQuality",
    "Quality",
    "Item",
    "review",
    "DEFAULT_EASINESS",
    "MIN_EASINESS",
    "MAX_INTERVAL",
]
