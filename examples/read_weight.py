#!/usr/bin/env python3
"""
Read Weight Script.

Connects to a SOEHNLE terminal, requests single readings and prints them.
Usage: read_weight.py <port> [count]
"""

import sys
import time
import logging

from soehnle import Message, Nak, Once, SerialTransport, TerminalError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


def main():
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <port> [count]")
        return

    port = sys.argv[1]
    count = int(sys.argv[2]) if len(sys.argv) > 2 else 5

    terminal = SerialTransport(port=port)
    if not terminal.connect():
        print(f"Failed to open {port}!")
        return

    try:
        for _ in range(count):
            try:
                response = terminal.request(Once())
            except TerminalError as e:
                print(f"Malformed frame: {e}")
                continue

            if response is None:
                print("No reply (timeout)")
            elif isinstance(response, Message):
                flag = "stable" if response.status.standstill else "moving"
                print(f"Balance {response.id:02d}: {response.value:.3f} kg ({flag})")
            elif isinstance(response, Nak):
                print("Terminal rejected the query")

            time.sleep(0.5)
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        terminal.disconnect()


if __name__ == "__main__":
    main()
