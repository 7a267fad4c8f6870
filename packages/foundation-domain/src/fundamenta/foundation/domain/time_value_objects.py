"""Time-related value objects: date-time ranges and birth dates.

Immutable, validated domain primitives. All validation occurs at
construction time. Anything that depends on "now" takes the reference
moment as a parameter so callers (and tests) control the clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

MAX_AGE_YEARS = 120


def _require_aware(value: datetime, name: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        msg = f"{name} must be timezone-aware: {value.isoformat()}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class DateTimeRange:
    """Closed interval between two timezone-aware instants.

    Attributes:
        start: Inclusive start instant.
        end: Inclusive end instant, strictly after start.

    Raises:
        ValueError: If either bound is naive or start is not before end.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _require_aware(self.start, "start")
        _require_aware(self.end, "end")
        if self.start >= self.end:
            msg = (
                "Start time must be before end time. "
                f"Start: {self.start.isoformat()}, End: {self.end.isoformat()}"
            )
            raise ValueError(msg)

    @classmethod
    def of(cls, start: datetime, duration: timedelta) -> DateTimeRange:
        return cls(start, start + duration)

    @classmethod
    def from_now(cls, duration: timedelta, now: datetime | None = None) -> DateTimeRange:
        start = now if now is not None else datetime.now(UTC)
        return cls(start, start + duration)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, other: datetime | DateTimeRange) -> bool:
        """Check containment of an instant or a whole range (inclusive)."""
        if isinstance(other, DateTimeRange):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other <= self.end

    def overlaps(self, other: DateTimeRange) -> bool:
        """True if the ranges share any instant other than a touching bound."""
        return self.start < other.end and self.end > other.start

    def is_within(self, other: DateTimeRange) -> bool:
        return other.contains(self)


@dataclass(frozen=True, slots=True)
class BirthDate:
    """Validated date of birth.

    Attributes:
        value: The birth date.

    Raises:
        ValueError: If the date is in the future or implies an age above 120.
    """

    value: date

    def __post_init__(self) -> None:
        today = datetime.now(UTC).date()
        if self.value > today:
            msg = f"Birth date cannot be in the future: {self.value.isoformat()}"
            raise ValueError(msg)
        if _years_between(self.value, today) > MAX_AGE_YEARS:
            msg = f"Invalid birth date: age > {MAX_AGE_YEARS}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, iso: str) -> BirthDate:
        return cls(date.fromisoformat(iso))

    @classmethod
    def of(cls, year: int, month: int, day: int) -> BirthDate:
        return cls(date(year, month, day))

    def age(self, today: date | None = None) -> int:
        """Completed years at ``today`` (UTC date when omitted)."""
        return _years_between(self.value, today or datetime.now(UTC).date())

    def is_adult(self, today: date | None = None, min_age: int = 18) -> bool:
        return self.age(today) >= min_age

    def masked(self) -> str:
        """Year only, suitable for logs."""
        return f"{self.value.year}-**-**"

    def __str__(self) -> str:
        return self.value.isoformat()


def _years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
