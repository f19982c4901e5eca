"""Single (non-repeating) interval parsing.

The repeating interval parser treats the interval body as opaque and delegates it to any callable
matching `IntervalParser`. `parse_interval` is the default implementation, built on `aniso8601`.

Supported forms:
    - `<duration>`, e.g. `PT1H`, `P1DT12H`, `P2W`;
    - `<start>/<duration>`, e.g. `2019-10-01T08:00:00Z/PT1H`;
    - `<start>/<end>`, e.g. `2019-10-01T08:00:00Z/2019-10-01T09:30:00Z`;
    - `<duration>/<end>`, e.g. `PT1H/2019-10-01T09:00:00Z`.

Two-part forms are delegated to `aniso8601.parse_interval`; date-only endpoints become midnight.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Protocol

import aniso8601
from pydantic import BaseModel, ConfigDict, model_validator

_INTERVAL_DELIMITER = "/"


class IntervalFormatError(ValueError):
    """Raised when text is not a supported ISO-8601 interval."""


class Interval(BaseModel):
    """A single time interval, optionally anchored at a start instant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: datetime | None = None
    duration: timedelta

    @model_validator(mode="after")
    def validate_duration(self) -> Interval:
        """Validate that the interval has a positive length."""

        if self.duration <= timedelta(0):
            raise ValueError("duration must be positive")
        return self


class IntervalParser(Protocol):
    """Parses interval body text; raises `ValueError` on malformed input."""

    def __call__(self, text: str) -> Interval: ...


def _as_datetime(value: date | datetime) -> datetime:
    # Date-only endpoints start at midnight.
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _parse_bounds(text: str) -> tuple[datetime, datetime]:
    first_text, _, second_text = text.partition(_INTERVAL_DELIMITER)
    if not first_text or not second_text:
        raise IntervalFormatError(f"Incomplete interval: {text!r}")

    try:
        first, second = aniso8601.parse_interval(text, intervaldelimiter=_INTERVAL_DELIMITER)
    except ValueError as exc:
        raise IntervalFormatError(f"Cannot parse interval {text!r}: {exc}") from exc

    # For `<duration>/<end>` aniso8601 returns the given end first, then the computed start.
    if text.startswith("P"):
        first, second = second, first
    return _as_datetime(first), _as_datetime(second)


def parse_interval(text: str) -> Interval:
    """Parse an ISO-8601 duration or a two-part interval into an `Interval`.

    Raises:
        IntervalFormatError: If the text is empty, not a valid ISO-8601 interval, or describes an
            interval without a positive duration.
    """

    if not text:
        raise IntervalFormatError("Interval text is empty")

    if _INTERVAL_DELIMITER not in text:
        if not text.startswith("P"):
            raise IntervalFormatError(f"Duration must start with P: {text!r}")
        try:
            duration = aniso8601.parse_duration(text)
        except ValueError as exc:
            raise IntervalFormatError(f"Cannot parse duration {text!r}: {exc}") from exc
        start = None
    else:
        start, end = _parse_bounds(text)
        try:
            duration = end - start
        except TypeError as exc:
            # Naive and aware instants cannot be subtracted.
            raise IntervalFormatError(
                f"Start and end must both carry a time zone or neither: {text!r}"
            ) from exc

    if duration <= timedelta(0):
        raise IntervalFormatError(f"Interval must have a positive duration: {text!r}")
    return Interval(start=start, duration=duration)
