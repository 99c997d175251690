"""Items (SM-2 review) API router.

Stateless: callers send the current item state and receive the next one.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from supermemo2.models import ItemModel, ReviewRequest, ReviewResponse
from supermemo2.srs import Item, review

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/items", tags=["items"])


@router.get("/new", response_model=ItemModel)
async def new_item() -> ItemModel:
    """Return the state of a brand-new item."""
    return ItemModel.from_item(Item.new())


@router.post("/review", response_model=ReviewResponse)
async def review_item(request: ReviewRequest) -> ReviewResponse:
    """Apply one review to the given item state and return the new state."""
    quality = request.to_quality()
    updated = review(request.item.to_item(), quality)

    logger.info(
        "Review applied: quality=%d, repetitions=%d->%d, interval=%d->%d, easiness=%.2f",
        quality,
        request.item.repetitions,
        updated.repetitions,
        request.item.interval,
        updated.interval,
        updated.easiness,
    )

    return ReviewResponse(
        item=ItemModel.from_item(updated),
        quality=int(quality),
        passed=quality.passed,
    )
