"""Sends a message to a server one bit at a time over user signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from types import TracebackType
from typing import Callable, TextIO

from sigtalk.printf import printf
from sigtalk.protocol import _as_bytes, _bit_signal, encode_byte
from sigtalk.text import atoi

_ACK_SIGNALS = (signal.SIGUSR2, signal.SIGUSR1)
_MIN_POLL = 0.0001


class Client:
    """Talks to one server process.

    Use it as a context manager: while inside, the acknowledgement
    signals are caught; outside, sending is refused, since an
    acknowledgement would otherwise end the process.
    """

    def __init__(
        self,
        server_pid: int,
        *,
        kill: Callable[[int, int], None] | None = None,
        delay: float = 0.0005,
        ack_timeout: float | None = None,
        stream: TextIO | None = None,
    ) -> None:
        if server_pid <= 0:
            raise ValueError(f"invalid server PID: {server_pid}")
        self.server_pid = server_pid
        self.delay = delay
        self.ack_timeout = ack_timeout
        self._kill = os.kill if kill is None else kill
        self._stream = stream
        self._acked = False
        self._previous: dict[int, object] | None = None

    def __enter__(self) -> Client:
        self._acked = False
        self._previous = {
            signum: signal.signal(signum, self._on_signal) for signum in _ACK_SIGNALS
        }
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._previous is not None:
            for signum, handler in self._previous.items():
                signal.signal(signum, handler)
            self._previous = None

    def _on_signal(self, signum: int, frame: object) -> None:
        self._acked = True
        if signum == signal.SIGUSR1:
            printf("Acknowledgment received message from server.\n", stream=self._stream)

    def _send_bits(self, byte: int) -> None:
        if self._previous is None:
            raise RuntimeError("client must be entered before sending")
        for bit in encode_byte(byte):
            self._kill(self.server_pid, _bit_signal(bit))
            if self.delay:
                time.sleep(self.delay)

    def _wait_ack(self) -> None:
        deadline = None
        if self.ack_timeout is not None:
            deadline = time.monotonic() + self.ack_timeout
        while not self._acked:
            if deadline is not None and time.monotonic() > deadline:
                raise TimeoutError("no acknowledgement from server")
            time.sleep(max(self.delay, _MIN_POLL))
        self._acked = False

    def send_byte(self, byte: int) -> None:
        """Send one byte and wait for the server to acknowledge it."""
        self._send_bits(byte)
        self._wait_ack()

    def send_message(self, message: bytes | bytearray | str) -> None:
        """Send every byte of ``message``; text is sent as UTF-8."""
        data = _as_bytes(message)
        if 0 in data:
            raise ValueError("message must not contain a NUL byte")
        for byte in data:
            self.send_byte(byte)

    def send_terminator(self) -> None:
        """End the message and wait for the server to acknowledge it."""
        self._send_bits(0)
        self._wait_ack()


def main(argv: list[str] | None = None) -> int:
    """Send ``argv[1]`` to the server whose PID is ``argv[0]``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        printf("invalid number of argument\n")
        return 1
    printf("client PID : %d\n", os.getpid())
    server_pid = atoi(args[0])
    if server_pid <= 0:
        printf("invalid server PID\n")
        return 1
    message = os.fsencode(args[1])
    with Client(server_pid) as client:
        client.send_message(message)
        client.send_terminator()
    return 0


if __name__ == "__main__":
    sys.exit(main())