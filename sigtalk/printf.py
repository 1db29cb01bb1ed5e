"""A small printf with the conversions c, s, d, i, u, p, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from sigtalk.text import _wrap_int, itoa

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value) & _POINTER_MASK
    return f"0x{address:x}"


def _convert(spec: str, value: Any) -> tuple[str, int]:
    """Render one argument; return the text and the count it contributes."""
    if spec == "c":
        return _as_char(value), 1
    if spec == "s":
        if value is None:
            # A missing string prints nothing and counts as an error.
            return "", -1
        text = str(value)
        return text, len(text)
    if spec in ("d", "i"):
        text = str(_wrap_int(int(value)))
    elif spec == "u":
        text = str(int(value) & _UINT_MASK)
    elif spec == "x":
        text = f"{int(value) & _UINT_MASK:x}"
    elif spec == "X":
        text = f"{int(value) & _UINT_MASK:X}"
    elif spec == "p":
        text = _as_pointer(value)
    else:
        raise ValueError(f"unknown conversion {spec!r}")
    return text, len(text)


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[tuple[str, int]]:
    """Yield (text, count) pieces for a format string and its arguments."""
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch, 1
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%", 1
        elif spec in "csdiupxX":
            try:
                value = next(pending)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            yield _convert(spec, value)
        # Unknown conversions print nothing and take no argument.


def format_message(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for these arguments."""
    return "".join(text for text, _ in _render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written; each ``%s`` given None
    writes nothing and lowers the count by one.
    """
    out = sys.stdout if stream is None else stream
    pieces = list(_render(fmt, args))
    out.write("".join(text for text, _ in pieces))
    return sum(count for _, count in pieces)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    (sys.stdout if stream is None else stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` and a newline; None writes nothing."""
    if text is None:
        return
    (sys.stdout if stream is None else stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    (sys.stdout if stream is None else stream).write(itoa(n))