"""Immutable data models for the SOEHNLE 30XX EDV Standard protocol.

All models are frozen dataclasses to ensure immutability and thread-safety.
Inbound frames become ``Response`` values (``Ack``, ``Nak`` or ``Message``);
outbound intent is expressed as ``Command`` or ``Query`` values, optionally
wrapped in ``WithAck``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

# Control bytes sent by the terminal in reply to an acknowledged command
ACK = "\x06"
NAK = "\x15"

STATUS_LENGTH = 4
MIN_MESSAGE_LENGTH = 7
MAX_MESSAGE_LENGTH = 27

# SetTare is rendered as exactly 7 digits
MAX_TARE_VALUE = 9_999_999


@dataclass(frozen=True)
class Status:
    """Balance status flags reported with every reading.

    Attributes:
        under_load: Weight is below the lower limit
        over_load: Weight is above the capacity of the balance
        standstill: Reading is stable
        empty_message: Terminal has no valid reading to report
    """
    under_load: bool
    over_load: bool
    standstill: bool
    empty_message: bool


@dataclass(frozen=True)
class Message:
    """A single weighing reading.

    Attributes:
        status: Status flags of the balance
        id: Balance/channel number (0-99)
        value: Signed net weight in kilograms
    """
    status: Status
    id: int
    value: float


@dataclass(frozen=True)
class Ack:
    """Terminal accepted the last command."""
    pass


@dataclass(frozen=True)
class Nak:
    """Terminal rejected the last command."""
    pass


# Command types

@dataclass(frozen=True)
class Tare:
    """Trigger an automatic tare."""
    pass


@dataclass(frozen=True)
class ClearTare:
    """Reset the tare to zero."""
    pass


@dataclass(frozen=True)
class SetTare:
    """Preset the tare to a fixed value.

    Attributes:
        value: Tare in display digits, 0 to MAX_TARE_VALUE
    """
    value: int


# Query types

@dataclass(frozen=True)
class Once:
    """Request a single reading."""
    pass


@dataclass(frozen=True)
class OnceOnChange:
    """Request a reading whenever the weight changes."""
    pass


Response = Union[Ack, Nak, Message]

Command = Union[Tare, ClearTare, SetTare]

Query = Union[Once, OnceOnChange]

_Inner = TypeVar("_Inner", Tare, ClearTare, SetTare, Once, OnceOnChange)


@dataclass(frozen=True)
class WithAck(Generic[_Inner]):
    """Request that the terminal answers with ACK/NAK before its reply.

    Only the rendered tag changes (lowercase instead of uppercase);
    the wrapped command or query keeps its meaning.

    Attributes:
        inner: Command or query to send
    """
    inner: _Inner


Outbound = Union[Tare, ClearTare, SetTare, Once, OnceOnChange, WithAck]
