"""Timer notation parsing.

`repeating_interval` parses `R<n>/<interval>` and `R/<interval>` into an immutable value; the
interval body is handled by `interval` (or any other `IntervalParser`).
"""

from bpmn_time.timer.errors import RepeatingIntervalFormatError
from bpmn_time.timer.interval import Interval, IntervalFormatError, IntervalParser, parse_interval
from bpmn_time.timer.repeating_interval import (
    INFINITE,
    INTERVAL_DESIGNATOR,
    ParseResult,
    RepeatingInterval,
    parse,
    try_parse,
)

__all__ = [
    "INFINITE",
    "INTERVAL_DESIGNATOR",
    "Interval",
    "IntervalFormatError",
    "IntervalParser",
    "ParseResult",
    "RepeatingInterval",
    "RepeatingIntervalFormatError",
    "parse",
    "parse_interval",
    "try_parse",
]
