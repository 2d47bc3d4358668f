"""Transport layer for weighing terminal communication."""

from .base import Transport
from .serial import SerialTransport

__all__ = ["Transport", "SerialTransport"]
