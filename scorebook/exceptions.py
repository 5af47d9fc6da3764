"""Exceptions raised by scorebook."""

from typing import Optional


class ScorebookError(Exception):
    """Base exception for all scorebook errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ScorebookError, ValueError):
    """Raised when a required value is missing or malformed."""


class MalformedFormat(ScorebookError, ValueError):
    """Raised when a roster or scale file does not follow the expected format.

    Attributes
    ----------
    line_number : Optional[int]
        The (1-based) line of the file where the problem was found, if known.

    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class IOFailure(ScorebookError, OSError):
    """Raised when reading or writing a file fails.

    The underlying :class:`OSError` is available as ``__cause__``.

    """
