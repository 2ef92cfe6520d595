import random

import pytest

from serialterm.codec import (
    HexDecodeError, InvalidHexDigitError, OddLengthError, RxFormat, TxFormat,
    decode_utf8, encode_command, format_binary_spaced, format_hex_spaced, hex_decode, render_bytes,
)


def test_hex_decode_spaced_and_packed():
    assert hex_decode("DE AD BE EF") == b"\xde\xad\xbe\xef"
    assert hex_decode("deadbeef") == b"\xde\xad\xbe\xef"
    assert hex_decode("  0a 0B  ") == b"\x0a\x0b"


def test_hex_decode_empty():
    assert hex_decode("") == b""
    assert hex_decode("   ") == b""


def test_hex_decode_odd_length():
    with pytest.raises(OddLengthError):
        hex_decode("ABC")


def test_hex_decode_bad_digit():
    with pytest.raises(InvalidHexDigitError) as exc:
        hex_decode("ZZ")
    assert "'Z'" in str(exc.value)
    assert isinstance(exc.value, HexDecodeError)
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("s", ["0x41", "41,42", "41\t42"])
def test_hex_decode_no_other_normalization(s):
    with pytest.raises(HexDecodeError):
        hex_decode(s)


def test_hex_round_trip():
    rng = random.Random(473)
    for size in (0, 1, 2, 15, 16, 17, 255):
        data = bytes(rng.randrange(256) for _ in range(size))
        text = format_hex_spaced(data)
        assert hex_decode(text) == data
        groups = text.split()
        assert len(groups) == len(data)
        assert all(len(g) == 2 for g in groups)


def test_format_hex_is_uppercase():
    assert format_hex_spaced(b"\xab\x01") == "AB 01"


def test_format_binary():
    assert format_binary_spaced(b"\x48\x00\xff") == "01001000 00000000 11111111"


def test_decode_utf8_error_is_reported_not_raised():
    assert decode_utf8(b"Hi") == "Hi"
    assert decode_utf8(b"\xff\xfe").startswith("Error decoding utf8:")


def test_render_bytes_order_and_fanout():
    buf = b"Hi\n"
    out = render_bytes(buf, {RxFormat.UTF8, RxFormat.BINARY, RxFormat.HEX})
    assert out == ["48 69 0A", "01001000 01101001 00001010", "Hi\n"]
    assert render_bytes(buf, set()) == []
    assert render_bytes(buf, [RxFormat.UTF8]) == ["Hi\n"]


def test_render_bytes_bad_utf8_keeps_other_formats():
    out = render_bytes(b"\xc3\x28", {RxFormat.HEX, RxFormat.UTF8})
    assert out[0] == "C3 28"
    assert out[1].startswith("Error decoding utf8:")


def test_encode_command():
    assert encode_command("héllo", TxFormat.UTF8) == "héllo".encode("utf-8")
    assert encode_command("68 69", TxFormat.HEX) == b"hi"
