"""Abstract base class for transport layer.

The Transport interface connects the protocol codec to a physical link.
It writes one rendered command per call and hands back one parsed
response per read. Retry and timeout policy belong to the caller.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Outbound, Response


class Transport(ABC):
    """Abstract transport interface for weighing terminal communication.

    Transports are responsible for:
    1. Managing connection lifecycle
    2. Sending commands and queries to the terminal
    3. Reading and parsing the terminal's replies
    """

    @abstractmethod
    def connect(self) -> bool:
        """Establish connection to the terminal.

        Returns:
            True if connection successful, False otherwise
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the terminal.

        Should be safe to call multiple times.
        """
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently connected."""
        pass

    @abstractmethod
    def send(self, outbound: Outbound) -> None:
        """Send a command or query to the terminal.

        Args:
            outbound: Command, Query or WithAck to send

        Example:
            >>> from soehnle.models import SetTare, WithAck
            >>> transport.send(WithAck(SetTare(1500)))
        """
        pass

    @abstractmethod
    def read_response(self) -> Optional[Response]:
        """Read and parse one reply from the terminal.

        Returns:
            Ack, Nak or Message, or None if nothing arrived before the timeout

        Raises:
            TerminalError: the received frame is malformed
        """
        pass

    def request(self, outbound: Outbound) -> Optional[Response]:
        """Send a command or query and read a single reply."""
        self.send(outbound)
        return self.read_response()

    def __enter__(self) -> Transport:
        """Context manager support - connect on enter."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager support - disconnect on exit."""
        self.disconnect()
