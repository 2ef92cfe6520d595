"""
Frame codec: hex text to bytes for transmit, and the per-format renderings
of a received buffer.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class HexDecodeError(ValueError):
    pass


class OddLengthError(HexDecodeError):
    pass


class InvalidHexDigitError(HexDecodeError):
    pass


class TxFormat(Enum):
    UTF8 = "utf8"
    HEX = "hex"


class RxFormat(Enum):
    UTF8 = "utf8"
    HEX = "hex"
    BINARY = "binary"


# Order in which renderings of one buffer are emitted
RENDER_ORDER = (RxFormat.HEX, RxFormat.BINARY, RxFormat.UTF8)


def hex_decode(s: str) -> bytes:
    """
    Parse a string of two-digit hex byte literals, e.g. 'DE AD be ef' or 'deadbeef'.

    Spaces are removed first; nothing else is normalized (no '0x', no commas).
    Raises OddLengthError or InvalidHexDigitError.
    """
    h = s.replace(" ", "")
    if len(h) % 2 != 0:
        raise OddLengthError(f"Odd number of hex digits: {len(h)}")
    for i, ch in enumerate(h):
        if ch not in HEX_DIGITS:
            raise InvalidHexDigitError(f"Invalid character {ch!r} at position {i}")
    return bytes.fromhex(h)


def encode_command(cmd: str, fmt: TxFormat) -> bytes:
    if fmt is TxFormat.HEX:
        return hex_decode(cmd)
    return cmd.encode("utf-8")


def format_hex_spaced(data: bytes) -> str:
    return ' '.join(f"{b:02X}" for b in data)


def format_binary_spaced(data: bytes) -> str:
    return ' '.join(f"{b:08b}" for b in data)


def decode_utf8(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        return f"Error decoding utf8: {e}"


_RENDERERS = {
    RxFormat.HEX: format_hex_spaced,
    RxFormat.BINARY: format_binary_spaced,
    RxFormat.UTF8: decode_utf8,
}


def render_bytes(buf: bytes, formats: Iterable[RxFormat]) -> List[str]:
    """One rendering of buf per active format, in RENDER_ORDER."""
    active = set(formats)
    return [_RENDERERS[fmt](buf) for fmt in RENDER_ORDER if fmt in active]
