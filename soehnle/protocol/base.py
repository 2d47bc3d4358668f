"""Abstract base class for terminal communication protocols.

Defines the interface for parsing incoming data and serializing commands.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Outbound, Response


class Protocol(ABC):
    """Abstract protocol for weighing terminal communication.

    Protocols handle:
    - Parsing incoming lines into responses
    - Serializing commands and queries into wire format
    """

    @abstractmethod
    def parse_line(self, line: str) -> Response:
        """Parse incoming line into a response.

        Args:
            line: Decoded string from the terminal

        Returns:
            Ack, Nak or Message

        Raises:
            TerminalError: line is not a valid frame
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> Response:
        """Parse raw bytes read from the serial line.

        Args:
            data: One complete frame, with or without line ending

        Returns:
            Ack, Nak or Message
        """
        pass

    @abstractmethod
    def serialize(self, outbound: Outbound) -> bytes:
        """Serialize a command or query into wire format.

        Args:
            outbound: Command, Query or WithAck to serialize

        Returns:
            Bytes ready to write to the serial line
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Protocol identifier (e.g., 'edv-standard')."""
        pass
