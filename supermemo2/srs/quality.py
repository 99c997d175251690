"""Validated review quality grade (0-5).

A Quality is an ``int`` that is guaranteed to be in range, so it compares and
sorts like the plain integer it wraps.
"""

from __future__ import annotations

from typing import Literal


Grade = Literal["again", "hard", "good", "easy"]


_GRADE_TO_QUALITY: dict[str, int] = {
    "again": 0,
    "hard": 3,
    "good": 4,
    "easy": 5,
}

_DESCRIPTIONS = (
    "complete blackout",
    "incorrect response; the correct one remembered",
    "incorrect response; the correct one seemed easy to recall",
    "correct response recalled with serious difficulty",
    "correct response after a hesitation",
    "perfect response",
)


class InvalidQuality(ValueError):
    """Raised when a grade outside 0-5 is given."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Quality must be between 0 and 5, {value!r} was given.")


class Quality(int):
    """A review grade between 0 and 5 inclusive.

    - 0 - complete blackout
    - 1 - incorrect response; the correct one remembered
    - 2 - incorrect response; the correct one seemed easy to recall
    - 3 - correct response recalled with serious difficulty
    - 4 - correct response after a hesitation
    - 5 - perfect response
    """

    __slots__ = ()

    MIN = 0
    MAX = 5
    PASSING = 3

    def __new__(cls, value: int) -> Quality:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidQuality(value)
        if value < cls.MIN or value > cls.MAX:
            raise InvalidQuality(value)
        return super().__new__(cls, value)

    @classmethod
    def from_grade(cls, grade: Grade) -> Quality:
        """Map a four-button grade name to its quality."""
        try:
            return cls(_GRADE_TO_QUALITY[grade])
        except (KeyError, TypeError):
            raise InvalidQuality(grade) from None

    @property
    def passed(self) -> bool:
        return self >= self.PASSING

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __repr__(self) -> str:
        return f"Quality({int(self)})"
