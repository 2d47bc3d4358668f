"""Error taxonomy for the EDV Standard codec.

Every parse or serialize failure raises exactly one of the exceptions
below. All of them derive from ``TerminalError`` (itself a ``ValueError``)
and carry an ``ErrorKind`` discriminant in ``.kind``.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of codec failures."""
    TARE_VALUE = "tare value exceeds 7 digits"
    MESSAGE_LENGTH = "invalid message length"
    NON_ASCII_STR = "string contains non-ascii characters"
    BALANCE_ID = "invalid balance id"
    BALANCE_VALUE = "invalid balance value"
    PARSE_BOOLEAN = "invalid status flag"


class TerminalError(ValueError):
    """Base class for all codec errors.

    Subclasses set ``kind``; the base class itself has none.
    """
    kind: Optional[ErrorKind] = None

    def __init__(self, detail: Optional[str] = None):
        if self.kind is None:
            message = detail or "terminal error"
        elif detail:
            message = f"{self.kind.value}: {detail}"
        else:
            message = self.kind.value
        super().__init__(message)
        self.detail = detail


class TareValueError(TerminalError):
    """Raised when a preset tare does not fit the 7-digit wire field."""
    kind = ErrorKind.TARE_VALUE


class MessageLengthError(TerminalError):
    """Raised when input is too short, too long or empty."""
    kind = ErrorKind.MESSAGE_LENGTH


class NonAsciiStrError(TerminalError):
    """Raised when input contains a character outside the ASCII range."""
    kind = ErrorKind.NON_ASCII_STR


class BalanceIdError(TerminalError):
    """Raised when the id field is not a non-negative integer."""
    kind = ErrorKind.BALANCE_ID


class BalanceValueError(TerminalError):
    """Raised when the weight field is not a number."""
    kind = ErrorKind.BALANCE_VALUE


class ParseBooleanError(TerminalError):
    """Raised when a status flag is neither '0' nor '1'."""
    kind = ErrorKind.PARSE_BOOLEAN
