"""
Serial driver seam: line configuration, the port handle capability set,
the pyserial-backed port factory and the port enumerator.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Protocol

import serial
import serial.tools.list_ports

from serialterm import config

logger = logging.getLogger(__name__)


class EnumerationError(RuntimeError):
    """The OS refused to list its serial devices."""


# ---------------- Line configuration ----------------
@dataclass
class PortConfig:
    port: str = ""
    baudrate: int = config.DEFAULT_BAUD_RATE
    bytesize: int = config.DEFAULT_DATA_BITS     # 5,6,7,8
    parity: str = config.DEFAULT_PARITY          # N,O,E
    stopbits: int = config.DEFAULT_STOP_BITS     # 1,2
    timeout_ms: int = config.READ_TIMEOUT_MS

    def to_kwargs(self):
        parity_map = {'N': serial.PARITY_NONE, 'O': serial.PARITY_ODD, 'E': serial.PARITY_EVEN}
        stop_map = {1: serial.STOPBITS_ONE, 2: serial.STOPBITS_TWO}
        byte_map = {5: serial.FIVEBITS, 6: serial.SIXBITS, 7: serial.SEVENBITS, 8: serial.EIGHTBITS}
        return dict(
            baudrate=self.baudrate,
            bytesize=byte_map[self.bytesize],
            parity=parity_map[self.parity],
            stopbits=stop_map[self.stopbits],
            rtscts=False, xonxoff=False, dsrdtr=False,
            timeout=self.timeout_ms/1000.0,
        )

    def describe(self) -> str:
        return f"{self.port} @ {self.baudrate}  ({self.bytesize}{self.parity}{self.stopbits})"


# ---------------- Handle ----------------
class PortHandle(Protocol):
    """What the session needs from an opened device. Errors propagate to the caller."""

    def available(self) -> int: ...

    def read(self, size: int) -> bytes: ...

    def write_all(self, payload: bytes) -> None: ...

    def close(self) -> None: ...


class SerialPortHandle:
    """PortHandle over a pyserial port object."""

    def __init__(self, ser: serial.SerialBase):
        self._ser = ser

    def available(self) -> int:
        return self._ser.in_waiting

    def read(self, size: int) -> bytes:
        # bounded by the port timeout; may return fewer than size bytes
        return bytes(self._ser.read(size))

    def write_all(self, payload: bytes) -> None:
        self._ser.write(payload); self._ser.flush()

    def close(self) -> None:
        if self._ser.is_open:
            self._ser.close()


# ---------------- Factory & enumerator ----------------
def open_port(cfg: PortConfig) -> SerialPortHandle:
    """Open cfg.port with cfg's line parameters. Raises serial.SerialException or ValueError."""
    # Works for URLs (loop://) and normal device names.
    ser = serial.serial_for_url(cfg.port, **cfg.to_kwargs())
    logger.debug("Opened %s", cfg.describe())
    return SerialPortHandle(ser)


def list_port_names() -> List[str]:
    try:
        ports = serial.tools.list_ports.comports()
    except Exception as e:
        raise EnumerationError(f"Unable to enumerate serial ports: {e}") from e
    names = sorted(p.device for p in ports)
    for p in ports:
        logger.debug("%s | desc=%s | hwid=%s", p.device, p.description, p.hwid)
    return names
