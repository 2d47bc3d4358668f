"""Serial transport implementation for SOEHNLE weighing terminals.

Implements the Transport interface on top of pyserial, using the Protocol
layer for parsing and serialization. The terminal is driven over RS232
with 8 data bits, no parity and one stop bit.
"""
from __future__ import annotations

import logging
from typing import Optional

import serial

from ..models import ACK, NAK, Outbound, Response
from ..protocol import EDVProtocol, Protocol
from .base import Transport

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 9600
READ_TIMEOUT = 1.0  # seconds
LINE_TERMINATOR = b"\r\n"

_CONTROL_BYTES = (ACK.encode("ascii"), NAK.encode("ascii"))


class SerialTransport(Transport):
    """Transport over an RS232 port.

    Responsibilities:
    - Open/close the serial port
    - Write serialized commands and queries
    - Read one frame at a time and parse it via the protocol layer

    Example:
        >>> from soehnle.models import Once
        >>> with SerialTransport(port="/dev/ttyUSB0") as terminal:
        ...     reading = terminal.request(Once())
    """

    def __init__(
        self,
        port: str,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = READ_TIMEOUT,
        protocol: Optional[Protocol] = None,
    ):
        """Initialize SerialTransport.

        Args:
            port: Serial port path (e.g., '/dev/ttyUSB0', 'COM3')
            baudrate: Serial baud rate (default 9600)
            timeout: Read timeout in seconds
            protocol: Protocol implementation (default: EDVProtocol)
        """
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._protocol = protocol or EDVProtocol()

        self._serial: Optional[serial.Serial] = None

    def connect(self) -> bool:
        """Open the serial port."""
        if self.is_connected():
            logger.warning("Already connected")
            return True

        try:
            self._serial = serial.Serial(
                port=self._port,
                baudrate=self._baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self._timeout,
            )
        except serial.SerialException as e:
            logger.error(f"Failed to open {self._port}: {e}")
            self._serial = None
            return False

        logger.info(f"Connected to terminal on {self._port} @ {self._baudrate} baud")
        return True

    def disconnect(self) -> None:
        """Close the serial port."""
        if self._serial is None:
            return

        try:
            self._serial.close()
        except serial.SerialException as e:
            logger.error(f"Error closing serial port: {e}")
        finally:
            self._serial = None

        logger.info("Disconnected from terminal")

    def is_connected(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def send(self, outbound: Outbound) -> None:
        """Serialize and write a command or query.

        Serialization errors (e.g. TareValueError) are raised before
        anything is written.
        """
        data = self._protocol.serialize(outbound)

        if not self.is_connected():
            logger.warning(f"Cannot send {data!r}, not connected")
            return

        self._serial.write(data)
        logger.debug(f"Sent {data!r}")

    def read_response(self) -> Optional[Response]:
        """Read one ACK/NAK byte or one CR LF terminated data frame."""
        if not self.is_connected():
            logger.warning("Cannot read, not connected")
            return None

        first = self._serial.read(1)
        # Skip line endings left over from a previous frame
        while first in (b"\r", b"\n"):
            first = self._serial.read(1)
        if not first:
            return None

        if first in _CONTROL_BYTES:
            return self._protocol.decode(first)

        frame = first + self._serial.read_until(LINE_TERMINATOR)
        logger.debug(f"Received {frame!r}")
        return self._protocol.decode(frame)
