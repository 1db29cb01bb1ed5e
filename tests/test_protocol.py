import signal

import pytest

from sigtalk.protocol import (
    Bit,
    Decoder,
    Event,
    _bit_signal,
    _signal_bit,
    encode_byte,
    encode_message,
)


def _decode(bits, pid=7):
    decoder = Decoder()
    events = [decoder.feed(bit, pid) for bit in bits]
    return events, decoder


def test_encode_byte_is_most_significant_first():
    assert encode_byte(0x41) == [
        Bit.ZERO, Bit.ONE, Bit.ZERO, Bit.ZERO,
        Bit.ZERO, Bit.ZERO, Bit.ZERO, Bit.ONE,
    ]


def test_encode_byte_zero_is_eight_zero_bits():
    assert encode_byte(0) == [Bit.ZERO] * 8


@pytest.mark.parametrize("byte", [-1, 256])
def test_encode_byte_rejects_out_of_range(byte):
    with pytest.raises(ValueError):
        encode_byte(byte)


def test_encode_message_ends_with_terminator():
    bits = encode_message(b"hi")
    assert len(bits) == 8 * 3
    assert bits[-8:] == [Bit.ZERO] * 8


def test_encode_message_text_is_utf8():
    assert encode_message("é") == encode_message("é".encode("utf-8"))


def test_encode_message_rejects_nul():
    with pytest.raises(ValueError):
        encode_message(b"a\0b")


def test_round_trip_through_decoder():
    message = b"hello, world"
    events, decoder = _decode(encode_message(message))
    received = bytes(e.byte for e in events if e.byte)
    assert received == message
    assert events[-1].end_of_message
    assert decoder.in_message is False
    assert decoder.bit_count == 0


def test_started_only_on_first_bit_of_each_message():
    bits = encode_message(b"ab") + encode_message(b"c")
    events, _ = _decode(bits)
    started = [index for index, e in enumerate(events) if e.started]
    assert started == [0, 24]


def test_incomplete_byte_reports_nothing():
    decoder = Decoder()
    event = decoder.feed(Bit.ONE, 3)
    assert event == Event(3, True, None)
    assert decoder.bit_count == 1


def test_event_carries_last_sender():
    decoder = Decoder()
    for bit in encode_byte(ord("x"))[:-1]:
        decoder.feed(bit, 1)
    event = decoder.feed(encode_byte(ord("x"))[-1], 2)
    assert event.sender_pid == 2
    assert event.byte == ord("x")


def test_feed_rejects_non_bit():
    with pytest.raises(ValueError):
        Decoder().feed(2, 1)


def test_signal_mapping_round_trip():
    for bit in Bit:
        assert _signal_bit(_bit_signal(bit)) is bit
    assert _bit_signal(Bit.ONE) == signal.SIGUSR1
    assert _bit_signal(Bit.ZERO) == signal.SIGUSR2


def test_signal_bit_rejects_other_signals():
    with pytest.raises(ValueError):
        _signal_bit(signal.SIGTERM)