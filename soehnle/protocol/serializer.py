"""Protocol serializer for SOEHNLE terminal commands and queries.

Converts command and query objects to EDV Standard strings.
Pure functions with no side effects.
"""
from __future__ import annotations

from ..errors import TareValueError
from ..models import (
    MAX_TARE_VALUE,
    ClearTare,
    Command,
    Once,
    OnceOnChange,
    Outbound,
    Query,
    SetTare,
    Tare,
    WithAck,
)


class ProtocolSerializer:
    """Serializer for the 30XX EDV Standard outbound format.

    Every command is a tag letter in angle brackets. An uppercase tag
    asks for the plain reply, a lowercase tag additionally asks the
    terminal to send ACK/NAK first.
    """

    @staticmethod
    def serialize(outbound: Outbound) -> str:
        """Convert any command, query or WithAck wrapper to a protocol string.

        Args:
            outbound: Command, Query, or WithAck wrapping either

        Returns:
            Protocol string ready to send over serial

        Examples:
            >>> ProtocolSerializer.serialize(WithAck(SetTare(1234)))
            '<t0001234>'
        """
        ack = False
        if isinstance(outbound, WithAck):
            ack = True
            outbound = outbound.inner

        if isinstance(outbound, (Tare, ClearTare, SetTare)):
            return ProtocolSerializer.serialize_command(outbound, ack=ack)
        elif isinstance(outbound, (Once, OnceOnChange)):
            return ProtocolSerializer.serialize_query(outbound, ack=ack)
        else:
            raise ValueError(f"Unknown outbound type: {type(outbound)}")

    @staticmethod
    def serialize_command(command: Command, ack: bool = False) -> str:
        """Convert a command object to a protocol string.

        Protocol:
        - Tare: <T> / <t>
        - ClearTare: <TC> / <tC>
        - SetTare: <T0001234> / <t0001234>

        Args:
            command: Tare, ClearTare or SetTare
            ack: Request ACK/NAK from the terminal

        Returns:
            Protocol string ready to send over serial

        Raises:
            TareValueError: SetTare value is negative or has more than 7 digits
        """
        tag = "t" if ack else "T"

        if isinstance(command, Tare):
            return f"<{tag}>"
        elif isinstance(command, ClearTare):
            return f"<{tag}C>"
        elif isinstance(command, SetTare):
            return f"<{tag}{ProtocolSerializer._tare_digits(command.value)}>"
        else:
            raise ValueError(f"Unknown command type: {type(command)}")

    @staticmethod
    def serialize_query(query: Query, ack: bool = False) -> str:
        """Convert a query object to a protocol string.

        Protocol:
        - Once: <A> / <a>
        - OnceOnChange: <B> / <b>
        """
        if isinstance(query, Once):
            tag = "A"
        elif isinstance(query, OnceOnChange):
            tag = "B"
        else:
            raise ValueError(f"Unknown query type: {type(query)}")

        return f"<{tag.lower() if ack else tag}>"

    @staticmethod
    def _tare_digits(value: int) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TareValueError(f"expected an integer, got {value!r}")
        if not 0 <= value <= MAX_TARE_VALUE:
            raise TareValueError(f"{value} not in 0-{MAX_TARE_VALUE}")
        return f"{value:07d}"
