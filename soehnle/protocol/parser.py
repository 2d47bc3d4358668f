"""Protocol parser for SOEHNLE EDV Standard frames.

Parses incoming serial lines into Status, Message and Response values.
Pure functions with no side effects; every failure raises a
``TerminalError`` subclass and no partial result is ever returned.
"""
from __future__ import annotations

import re

from ..errors import (
    BalanceIdError,
    BalanceValueError,
    MessageLengthError,
    NonAsciiStrError,
    ParseBooleanError,
)
from ..models import (
    ACK,
    NAK,
    MAX_MESSAGE_LENGTH,
    MIN_MESSAGE_LENGTH,
    STATUS_LENGTH,
    Ack,
    Message,
    Nak,
    Response,
    Status,
)

# ASCII whitespace only; str.strip() would also drop \x85, \xa0 and \x1c-\x1f
_WHITESPACE = " \t\r\n\x0b\x0c"

# Tare-mode marker inside the id field
TARE_MARKER = "W"

# Noise tokens removed from the weight field before number parsing
WEIGHT_NOISE = ("N", "kg", " ")

# Plain decimal: sign, digits, optional fraction and exponent
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ProtocolParser:
    """Parser for the 30XX EDV Standard inbound format.

    A data frame is laid out by position::

        SSSS II nnnnnnnnnnnnnnnnnnnnn
        |    |  +- net weight, e.g. "N    -1000,0 kg"
        |    +---- balance id, optionally "W"-marked
        +--------- four status flags

    Control replies are the single bytes ACK (0x06) and NAK (0x15).
    """

    @staticmethod
    def parse_status(text: str) -> Status:
        """Parse the four status flag characters.

        Args:
            text: Exactly four characters, each '0' or '1'

        Returns:
            Parsed Status

        Raises:
            MessageLengthError: text is not four characters long
            NonAsciiStrError: text contains non-ASCII characters
            ParseBooleanError: a flag is neither '0' nor '1'

        Examples:
            >>> ProtocolParser.parse_status("0011")
            Status(under_load=False, over_load=False, standstill=True, empty_message=True)
        """
        if len(text) != STATUS_LENGTH:
            raise MessageLengthError(f"status needs {STATUS_LENGTH} characters, got {len(text)}")
        if not text.isascii():
            raise NonAsciiStrError(repr(text))

        flags = [ProtocolParser._parse_flag(char) for char in text]
        return Status(
            under_load=flags[0],
            over_load=flags[1],
            standstill=flags[2],
            empty_message=flags[3],
        )

    @staticmethod
    def parse_message(text: str) -> Message:
        """Parse a data frame into a Message.

        Args:
            text: One line from the terminal, with or without line ending

        Returns:
            Parsed Message

        Raises:
            MessageLengthError: trimmed line is shorter than 7 or longer than 27
            NonAsciiStrError: line contains non-ASCII characters
            ParseBooleanError: status flags are malformed
            BalanceIdError: id field is not a number
            BalanceValueError: weight field is not a number

        Examples:
            >>> msg = ProtocolParser.parse_message("000101N        3,1 kg")
            >>> msg.id, msg.value
            (1, 3.1)
        """
        text = text.strip(_WHITESPACE)

        # Length counts characters; bytes from the wire map 1:1 via latin-1
        if not MIN_MESSAGE_LENGTH <= len(text) <= MAX_MESSAGE_LENGTH:
            raise MessageLengthError(
                f"message needs {MIN_MESSAGE_LENGTH}-{MAX_MESSAGE_LENGTH} characters, got {len(text)}"
            )
        if not text.isascii():
            raise NonAsciiStrError(repr(text))

        status = ProtocolParser.parse_status(text[:4])
        balance_id = ProtocolParser._parse_id(text[4:6])
        value = ProtocolParser._parse_weight(text[6:])

        return Message(status=status, id=balance_id, value=value)

    @staticmethod
    def parse_response(text: str) -> Response:
        """Classify a line as ACK, NAK or data message.

        Args:
            text: One line (or single control byte) from the terminal

        Returns:
            Ack, Nak or Message

        Raises:
            MessageLengthError: line is empty after trimming
            TerminalError: any error from parse_message
        """
        text = text.strip(_WHITESPACE)

        if not text:
            raise MessageLengthError("empty response")

        if text[0] == ACK:
            return Ack()
        if text[0] == NAK:
            return Nak()

        return ProtocolParser.parse_message(text)

    @staticmethod
    def _parse_flag(char: str) -> bool:
        if char == "1":
            return True
        if char == "0":
            return False
        raise ParseBooleanError(repr(char))

    @staticmethod
    def _parse_id(field: str) -> int:
        """Parse the two-character id field, ignoring the tare marker."""
        digits = field.replace(TARE_MARKER, "")
        # Digits only; a sign ("+5", "-1") is rejected
        if not digits.isdigit():
            raise BalanceIdError(repr(field))
        return int(digits)

    @staticmethod
    def _parse_weight(field: str) -> float:
        """Parse the net weight field.

        The terminal pads the field with spaces (also between sign and
        digits), prefixes it with 'N' and may append 'kg'. The decimal
        separator is a comma.
        """
        number = field
        for token in WEIGHT_NOISE:
            number = number.replace(token, "")
        number = number.replace(",", ".").strip(_WHITESPACE)

        if not _NUMBER.fullmatch(number):
            raise BalanceValueError(repr(field))
        return float(number)
