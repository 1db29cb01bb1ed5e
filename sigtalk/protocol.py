"""Bit-level framing of messages carried by two user signals.

Each byte travels as eight bits, most significant first. A one bit is
carried by SIGUSR1 and a zero bit by SIGUSR2. A message ends with a NUL
byte, which is eight zero bits.
"""

from __future__ import annotations

import enum
import signal
from dataclasses import dataclass

BITS_PER_BYTE = 8


class Bit(enum.IntEnum):
    """One bit on the wire."""

    ZERO = 0
    ONE = 1


def _bit_signal(bit: Bit) -> int:
    """Return the signal number that carries ``bit``."""
    return signal.SIGUSR1 if Bit(bit) is Bit.ONE else signal.SIGUSR2


def _signal_bit(signum: int) -> Bit:
    """Return the bit that the signal ``signum`` carries."""
    if signum == signal.SIGUSR1:
        return Bit.ONE
    if signum == signal.SIGUSR2:
        return Bit.ZERO
    raise ValueError(f"signal {signum} does not carry a bit")


def _as_bytes(message: bytes | bytearray | str) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_byte(byte: int) -> list[Bit]:
    """Return the eight bits of ``byte``, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return [Bit((byte >> shift) & 1) for shift in reversed(range(BITS_PER_BYTE))]


def encode_message(message: bytes | bytearray | str) -> list[Bit]:
    """Return the bits of a whole message, terminator included.

    Text is sent as UTF-8. A message may not hold a NUL byte, since the
    receiver would take it for the end of the message.
    """
    data = _as_bytes(message)
    if 0 in data:
        raise ValueError("message must not contain a NUL byte")
    bits = [bit for byte in data for bit in encode_byte(byte)]
    bits.extend(encode_byte(0))
    return bits


@dataclass(frozen=True)
class Event:
    """What one received bit amounted to.

    ``started`` is true for the first bit of a message. ``byte`` is set
    once eight bits have arrived; a byte of 0 ends the message.
    """

    sender_pid: int
    started: bool = False
    byte: int | None = None

    @property
    def end_of_message(self) -> bool:
        return self.byte == 0


class Decoder:
    """Reassembles bytes from bits as they arrive."""

    def __init__(self) -> None:
        self.bit_count = 0
        self.value = 0
        self.in_message = False

    def feed(self, bit: Bit | int, sender_pid: int) -> Event:
        """Take one bit from ``sender_pid`` and report what it completed."""
        bit = Bit(bit)
        started = not self.in_message
        self.in_message = True
        self.value = (self.value << 1) | bit
        self.bit_count += 1
        if self.bit_count < BITS_PER_BYTE:
            return Event(sender_pid, started)
        byte = self.value
        self.value = 0
        self.bit_count = 0
        if byte == 0:
            self.in_message = False
        return Event(sender_pid, started, byte)