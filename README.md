# sigtalk

Send a text message from one process to another using nothing but the
`SIGUSR1` and `SIGUSR2` signals. Each byte travels as eight signals, most
significant bit first: `SIGUSR1` carries a 1, `SIGUSR2` carries a 0. A zero
byte ends the message.

The server acknowledges every byte with `SIGUSR2`, and the client waits for
that before it sends the next byte. When the server receives the closing
zero byte, it answers with `SIGUSR1` to confirm the whole message.

## Requirements

Python 3.10 or later on a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which Python provides on Linux but not on every
POSIX system (macOS lacks it). The client needs only `os.kill` and
`signal.signal`.

## Install

```
pip install .
```

## Use

Start the server in one terminal. It prints its process id and then waits
until it is interrupted with Ctrl-C:

```
sigtalk-server
Server PID : 4242
```

Send a message from another terminal, giving the server's process id and
the text:

```
sigtalk-client 4242 "hello there"
```

The client prints its own process id (`client PID : ...`), sends the
message byte by byte, then sends the closing zero byte. When the server
confirms the message, the client prints
`Acknowledgment received message from server.` and exits.

The server prints `client PID : ...` with the sender's process id at the
start of each message, then the message bytes as they arrive, and a newline
when the message ends.

The client exits with status 1 and a message when:

- it is not given exactly two arguments (`invalid number of argument`);
- the process id does not parse to a positive number (`invalid server PID`).

The process id is read the way C's `atoi` reads it: leading whitespace and
one sign are accepted, and parsing stops at the first non-digit.

## Library

### `sigtalk.protocol`

- `Bit` — an `IntEnum` with `ZERO` and `ONE`.
- `encode_byte(byte)` — the eight bits of a byte, most significant first;
  raises `ValueError` outside 0–255.
- `encode_message(message)` — the bits of a whole message, with the closing
  zero byte appended. Text is encoded as UTF-8; a message holding a NUL
  byte raises `ValueError`.
- `Decoder.feed(bit, sender_pid)` — takes one bit and returns an `Event`.
  `Event.started` is true for the first bit of a message, `Event.byte` is
  set once eight bits have arrived, and `Event.end_of_message` is true when
  that byte is 0.

### `sigtalk.server`

`Server(stream=None, kill=None)` writes received bytes to `stream` (binary
standard output by default) and sends acknowledgements with `kill`
(`os.kill` by default). `Server.handle(signum, sender_pid)` processes one
signal and returns the resulting `Event`; a signal other than `SIGUSR1` or
`SIGUSR2` raises `ValueError`. `Server.run()` prints the server's PID and
serves signals until interrupted.

### `sigtalk.client`

`Client(server_pid, *, kill=None, delay=0.0005, ack_timeout=None,
stream=None)` sends to one server. Use it as a context manager: inside the
`with` block the acknowledgement signals are caught; sending outside it
raises `RuntimeError`.

- `send_byte(byte)` sends one byte and waits for its acknowledgement.
- `send_message(message)` sends every byte of a message (text as UTF-8);
  NUL bytes raise `ValueError`.
- `send_terminator()` sends the closing zero byte and waits for the
  acknowledgement.

`delay` is the pause after each signal, in seconds. With `ack_timeout` set,
a missing acknowledgement raises `TimeoutError`; without it the client
waits indefinitely.

```python
from sigtalk.client import Client

with Client(4242, ack_timeout=5.0) as client:
    client.send_message("hello there")
    client.send_terminator()
```

### `sigtalk.printf` and `sigtalk.text`

Small helpers both programs use.

- `sigtalk.printf`: `format_message(fmt, *args)` and
  `printf(fmt, *args, stream=None)` support the conversions `%c %s %d %i
  %u %p %x %X %%`; `printf` returns the count of characters written. Also
  `put_str`, `put_endl` and `put_nbr`.
- `sigtalk.text`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strchr`,
  `strrchr`, and the ASCII helpers `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_lower`, `to_upper`.

## Limits

- The server keeps one decoder for all senders. It does not separate
  messages from clients that send at the same time; their bits interleave.
- Messages cannot contain NUL bytes, since a zero byte ends a message.
- There is no retransmission: a lost signal corrupts the current byte, and
  without `ack_timeout` the client then waits for an acknowledgement that
  may never come.
- Nothing works on Windows, which has no `SIGUSR1` or `SIGUSR2`.

## Tests

```
pip install ".[test]"
pytest
```