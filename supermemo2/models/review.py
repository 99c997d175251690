"""Models for the review endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from supermemo2.srs import DEFAULT_EASINESS, MIN_EASINESS, Grade, Item, Quality


class ItemModel(BaseModel):
    """SM-2 state of one learning item as sent over the wire."""

    easiness: float = Field(
        DEFAULT_EASINESS,
        ge=MIN_EASINESS,
        allow_inf_nan=False,
        description="SM-2 easiness factor (min 1.3)",
    )
    repetitions: int = Field(0, ge=0, description="Consecutive successful reviews")
    interval: int = Field(0, ge=0, description="Days until the item is next due")

    @classmethod
    def from_item(cls, item: Item) -> ItemModel:
        return cls(easiness=item.easiness, repetitions=item.repetitions, interval=item.interval)

    def to_item(self) -> Item:
        return Item(easiness=self.easiness, repetitions=self.repetitions, interval=self.interval)


class ReviewRequest(BaseModel):
    """Request body for POST /items/review.

    Exactly one of ``quality`` (0-5) or ``grade`` must be given.
    """

    item: ItemModel = Field(default_factory=ItemModel, description="Current item state (new item if omitted)")
    quality: int | None = Field(None, description="Review quality 0-5")
    grade: Grade | None = Field(None, description="Four-button grade, mapped to a quality")

    @field_validator("quality")
    @classmethod
    def _validate_quality(cls, value: int | None) -> int | None:
        if value is None:
            return None
        # InvalidQuality is a ValueError, so pydantic reports it as a 422
        return int(Quality(value))

    @model_validator(mode="after")
    def _require_one_grade(self) -> ReviewRequest:
        if (self.quality is None) == (self.grade is None):
            raise ValueError("exactly one of 'quality' or 'grade' is required")
        return self

    def to_quality(self) -> Quality:
        if self.grade is not None:
            return Quality.from_grade(self.grade)
        return Quality(self.quality)


class ReviewResponse(BaseModel):
    """Response for POST /items/review."""

    item: ItemModel
    quality: int
    passed: bool
