"""SOEHNLE Terminal 30XX SDK - EDV Standard RS232 codec."""

from .errors import (
    ErrorKind,
    TerminalError,
    TareValueError,
    MessageLengthError,
    NonAsciiStrError,
    BalanceIdError,
    BalanceValueError,
    ParseBooleanError,
)
from .models import (
    Status,
    Message,
    Ack,
    Nak,
    Response,
    Tare,
    ClearTare,
    SetTare,
    Command,
    Once,
    OnceOnChange,
    Query,
    WithAck,
    Outbound,
)
from .protocol import Protocol, EDVProtocol, ProtocolParser, ProtocolSerializer
from .transport import Transport, SerialTransport

__all__ = [
    "ErrorKind",
    "TerminalError",
    "TareValueError",
    "MessageLengthError",
    "NonAsciiStrError",
    "BalanceIdError",
    "BalanceValueError",
    "ParseBooleanError",
    "Status",
    "Message",
    "Ack",
    "Nak",
    "Response",
    "Tare",
    "ClearTare",
    "SetTare",
    "Command",
    "Once",
    "OnceOnChange",
    "Query",
    "WithAck",
    "Outbound",
    "Protocol",
    "EDVProtocol",
    "ProtocolParser",
    "ProtocolSerializer",
    "Transport",
    "SerialTransport",
]
