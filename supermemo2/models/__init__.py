"""Models module for Pydantic schemas."""

from .review import ItemModel, ReviewRequest, ReviewResponse

__all__ = [
    "ItemModel",
    "ReviewRequest",
    "ReviewResponse",
]
