"""Repeating interval notation: `R<n>/<interval>` and `R/<interval>`.

The text is split at the first occurrence of the interval designator (default `/`):
    - the left part is the repetition marker `R` followed by an optional decimal count;
      a missing count means the interval repeats indefinitely (`INFINITE`);
    - the right part is the interval body, delegated to an `IntervalParser`.

Only the first designator matters, so `R/2019-10-01T08:00:00Z/PT1H` is an infinitely repeating
interval whose body is `2019-10-01T08:00:00Z/PT1H`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator

from bpmn_time.timer.errors import (
    EmptyInputError,
    IntervalBodyError,
    InvalidRepetitionCountError,
    MissingIntervalError,
    MissingMarkerError,
    RepeatingIntervalFormatError,
)
from bpmn_time.timer.interval import Interval, IntervalParser, parse_interval

logger = logging.getLogger(__name__)

INTERVAL_DESIGNATOR = "/"
INFINITE = -1
MAX_REPETITIONS = 2**31 - 1

_REPETITION_MARKER = "R"
_COUNT_RE = re.compile(r"[0-9]+")


class RepeatingInterval(BaseModel):
    """An interval repeated a fixed number of times, or indefinitely."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    repetitions: StrictInt
    interval: Interval

    @model_validator(mode="after")
    def validate_repetitions(self) -> RepeatingInterval:
        """Validate that `repetitions` is `INFINITE` or a count within `[0, MAX_REPETITIONS]`."""

        if self.repetitions == INFINITE:
            return self
        if not 0 <= self.repetitions <= MAX_REPETITIONS:
            raise ValueError(f"repetitions must be {INFINITE} or in [0, {MAX_REPETITIONS}]")
        return self

    @property
    def is_infinite(self) -> bool:
        return self.repetitions == INFINITE


@dataclass(frozen=True)
class ParseResult:
    """Outcome of `try_parse`: either a value or the format error that prevented it."""

    value: RepeatingInterval | None = None
    error: RepeatingIntervalFormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_repetitions(repetitions_text: str) -> int:
    try:
        repetitions = int(repetitions_text, 10)
    except ValueError as exc:
        raise InvalidRepetitionCountError(
            "Cannot parse repetitions count", repetitions_text, 1
        ) from exc

    # int() also accepts signs, surrounding whitespace and underscores.
    if not _COUNT_RE.fullmatch(repetitions_text) or repetitions > MAX_REPETITIONS:
        raise InvalidRepetitionCountError("Cannot parse repetitions count", repetitions_text, 1)
    return repetitions


def parse(
        text: str,
        designator: str = INTERVAL_DESIGNATOR,
        *,
        interval_parser: IntervalParser = parse_interval,
) -> RepeatingInterval:
    """Parse a repeating interval such as `R5/PT1H` or `R/PT1H`.

    Args:
        text: Text to parse.
        designator: Separator between the repetition marker and the interval body.
        interval_parser: Parser for the interval body; must raise `ValueError` on bad input.

    Returns:
        The parsed `RepeatingInterval`; `repetitions` is `INFINITE` when no count is given.

    Raises:
        RepeatingIntervalFormatError: One of its subclasses, if the text is malformed.
        ValueError: If `designator` is empty.
    """

    if not designator:
        raise ValueError("designator must not be empty")

    if not text:
        raise EmptyInputError("Repetition spec is empty", text, 0)

    offset = text.find(designator)
    body_offset = offset + len(designator)

    if text[0] != _REPETITION_MARKER:
        raise MissingMarkerError("Repetition spec must start with R", text, 0)

    if offset == -1 or body_offset >= len(text):
        raise MissingIntervalError("No interval given", text, offset)

    interval_text = text[body_offset:]
    try:
        interval = interval_parser(interval_text)
    except ValueError as exc:
        raise IntervalBodyError(str(exc), interval_text, body_offset) from exc

    repetitions = INFINITE
    if offset > 1:
        repetitions = _parse_repetitions(text[1:offset])

    return RepeatingInterval(repetitions=repetitions, interval=interval)


def try_parse(
        text: str,
        designator: str = INTERVAL_DESIGNATOR,
        *,
        interval_parser: IntervalParser = parse_interval,
) -> ParseResult:
    """Parse like `parse`, but return format errors instead of raising them."""

    try:
        value = parse(text, designator, interval_parser=interval_parser)
    except RepeatingIntervalFormatError as exc:
        logger.debug("rejected repeating interval %r: %s", text, exc)
        return ParseResult(error=exc)
    return ParseResult(value=value)
