"""Events accepted by the router, from the UI and from the listener tick."""

from __future__ import annotations
from dataclasses import dataclass

from serialterm.codec import TxFormat


# ---------- selections ----------
@dataclass(frozen=True)
class SelectPort:
    name: str


@dataclass(frozen=True)
class SelectBaud:
    baudrate: int


@dataclass(frozen=True)
class SelectDataBits:
    bits: int


@dataclass(frozen=True)
class SelectParity:
    parity: str     # N,O,E


@dataclass(frozen=True)
class SelectStopBits:
    bits: int


@dataclass(frozen=True)
class ChangeCommand:
    text: str


@dataclass(frozen=True)
class SelectTxFormat:
    fmt: TxFormat


@dataclass(frozen=True)
class ToggleRxUtf8:
    on: bool


@dataclass(frozen=True)
class ToggleRxHex:
    on: bool


@dataclass(frozen=True)
class ToggleRxBin:
    on: bool


@dataclass(frozen=True)
class SelectTheme:
    theme: str


@dataclass(frozen=True)
class HoverTheme:
    theme: str


# ---------- session actions ----------
@dataclass(frozen=True)
class OpenPort:
    pass


@dataclass(frozen=True)
class ClosePort:
    pass


@dataclass(frozen=True)
class Send:
    pass


@dataclass(frozen=True)
class Recv:
    pass


@dataclass(frozen=True)
class ToggleListener:
    pass
