"""Protocol layer for serial communication with SOEHNLE weighing terminals."""

from .base import Protocol
from .edv_protocol import EDVProtocol
from .parser import ProtocolParser
from .serializer import ProtocolSerializer

__all__ = [
    "Protocol",
    "EDVProtocol",
    "ProtocolParser",
    "ProtocolSerializer",
]
