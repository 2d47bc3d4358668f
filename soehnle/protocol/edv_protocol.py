"""EDV Standard protocol implementation.

Wraps the ProtocolParser and ProtocolSerializer.
"""
from __future__ import annotations

import logging

from ..errors import TerminalError
from ..models import Outbound, Response
from .base import Protocol
from .parser import ProtocolParser
from .serializer import ProtocolSerializer

logger = logging.getLogger(__name__)

WIRE_ENCODING = "ascii"


class EDVProtocol(Protocol):
    """30XX EDV Standard protocol for SOEHNLE weighing terminals.

    Uses:
    - SSSSIInnnn data frames for readings
    - 0x06 / 0x15 control bytes for ACK / NAK
    - <X> bracketed commands (e.g., <T>, <tC>, <A>)
    """

    def __init__(self):
        self._parser = ProtocolParser()
        self._serializer = ProtocolSerializer()

    def parse_line(self, line: str) -> Response:
        """Parse a single line from the serial stream."""
        try:
            return self._parser.parse_response(line)
        except TerminalError as e:
            logger.debug(f"Rejected frame {line!r}: {e}")
            raise

    def decode(self, data: bytes) -> Response:
        """Decode raw bytes and parse them.

        Bytes are mapped one-to-one to characters so that anything above
        0x7F is reported as NonAsciiStrError by the parser.
        """
        return self.parse_line(data.decode("latin-1"))

    def serialize(self, outbound: Outbound) -> bytes:
        """Serialize command or query to ASCII bytes without terminator."""
        return self._serializer.serialize(outbound).encode(WIRE_ENCODING)

    @property
    def name(self) -> str:
        return "edv-standard"
