"""Format errors raised while parsing repeating interval text."""

from __future__ import annotations


class RepeatingIntervalFormatError(ValueError):
    """Raised when text is not a well-formed repeating interval.

    Attributes:
        parsed_text: The text (or substring) that was being parsed when the error was detected.
        error_index: Index into the original input where the problem was found (`-1` if the
            designator could not be located).
    """

    def __init__(self, message: str, parsed_text: str, error_index: int) -> None:
        super().__init__(message)
        self.parsed_text = parsed_text
        self.error_index = error_index


class EmptyInputError(RepeatingIntervalFormatError):
    """Raised when the input text is empty."""


class MissingMarkerError(RepeatingIntervalFormatError):
    """Raised when the text does not start with the `R` repetition marker."""


class MissingIntervalError(RepeatingIntervalFormatError):
    """Raised when the designator is absent or nothing follows it."""


class InvalidRepetitionCountError(RepeatingIntervalFormatError):
    """Raised when the text between `R` and the designator is not a valid count."""


class IntervalBodyError(RepeatingIntervalFormatError):
    """Raised when the interval parser rejects the text after the designator."""
