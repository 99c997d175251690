"""SM-2 state update logic.

Intervals are abstract day counts. Turning them into due dates is left to the
caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .quality import Quality


MIN_EASINESS = 1.3
DEFAULT_EASINESS = 2.5
# ~100 years; intervals saturate here
MAX_INTERVAL = 36500


@dataclass(frozen=True)
class Item:
    easiness: float = DEFAULT_EASINESS
    repetitions: int = 0
    interval: int = 0

    def __post_init__(self):
        if not math.isfinite(self.easiness):
            raise ValueError(f"easiness must be finite, got {self.easiness}")
        for name in ("repetitions", "interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        if self.easiness < MIN_EASINESS:
            raise ValueError(f"easiness must be >= {MIN_EASINESS}, got {self.easiness}")
        if self.repetitions < 0:
            raise ValueError(f"repetitions must be >= 0, got {self.repetitions}")
        if self.interval < 0:
            raise ValueError(f"interval must be >= 0, got {self.interval}")

    @classmethod
    def new(cls) -> Item:
        """Return a fresh item: easiness 2.5, no repetitions, interval 0."""
        return cls()

    def review(self, quality: Quality | int) -> Item:
        """Return the state after one review. ``self`` is left untouched."""
        return review(self, quality)


def _clamp_easiness(ef: float) -> float:
    return max(MIN_EASINESS, ef)


def _scale_interval(interval: int, ef: float) -> int:
    product = interval * ef
    if not math.isfinite(product) or product >= MAX_INTERVAL:
        return MAX_INTERVAL
    # Round away float noise first so e.g. 15.000000000000002 stays 15.
    return max(1, math.ceil(round(product, 6)))


def review(item: Item, quality: Quality | int) -> Item:
    """Apply one SM-2 review to ``item`` and return the new state.

    quality: a Quality, or a raw int validated as one (raises InvalidQuality)

    Rules:
    - EF' = EF + (0.1 - (5-q)*(0.08 + (5-q)*0.02)), clamped to >= 1.3
    - if q < 3: repetitions = 0, interval = 1
    - else:
        repetitions += 1
        if repetitions == 1: interval = 1
        if repetitions == 2: interval = 6
        else: interval = ceil(previous interval * EF'), capped at MAX_INTERVAL

    The scaled interval rounds up to the next whole day rather than to the
    nearest day, so 6 * 2.36 = 14.16 gives 15, not 14.
    """
    q = Quality(quality)

    ef_prime = item.easiness + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    ef_prime = _clamp_easiness(ef_prime)

    if not q.passed:
        return Item(easiness=ef_prime, repetitions=0, interval=1)

    reps_prime = item.repetitions + 1
    if reps_prime == 1:
        interval_prime = 1
    elif reps_prime == 2:
        interval_prime = 6
    else:
        interval_prime = _scale_interval(item.interval, ef_prime)

    return Item(easiness=ef_prime, repetitions=reps_prime, interval=interval_prime)
