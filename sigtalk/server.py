"""Receives messages bit by bit from clients over user signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable

from sigtalk.printf import format_message
from sigtalk.protocol import Decoder, Event, _signal_bit

_WIRE_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Prints each received message and acknowledges every byte.

    A byte is acknowledged with SIGUSR2 and the end of a message with
    SIGUSR1, both sent to the process that sent the last bit.
    """

    def __init__(
        self,
        stream: BinaryIO | None = None,
        kill: Callable[[int, int], None] | None = None,
    ) -> None:
        self._stream = stream
        self._kill = os.kill if kill is None else kill
        self.decoder = Decoder()

    @property
    def stream(self) -> BinaryIO:
        return sys.stdout.buffer if self._stream is None else self._stream

    def _write(self, data: bytes) -> None:
        self.stream.write(data)
        self.stream.flush()

    def _acknowledge(self, pid: int, signum: int) -> None:
        if pid > 0:
            self._kill(pid, signum)

    def handle(self, signum: int, sender_pid: int) -> Event:
        """Process one signal from ``sender_pid`` and return what it made."""
        event = self.decoder.feed(_signal_bit(signum), sender_pid)
        if event.started:
            self._write(format_message("client PID : %d\n", sender_pid).encode())
        if event.end_of_message:
            self._write(b"\n")
            self._acknowledge(sender_pid, signal.SIGUSR1)
        elif event.byte is not None:
            self._write(bytes([event.byte]))
            self._acknowledge(sender_pid, signal.SIGUSR2)
        return event

    def run(self) -> None:
        """Announce this process's PID and serve signals until interrupted."""
        self._write(format_message("Server PID : %d\n", os.getpid()).encode())
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WIRE_SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_WIRE_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Run the server in the foreground; it takes no arguments."""
    try:
        Server().run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())