"""
Session controller: owns the port handle, the line configuration, listener
state, transmit/receive formats, the composed command and the session log.

Every operation converts its failures into log lines; nothing here raises
for I/O, decode or selection errors.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, List, Optional, Set

import serial

from serialterm import config, themes
from serialterm.codec import (
    InvalidHexDigitError, OddLengthError, RxFormat, TxFormat, encode_command, render_bytes,
)
from serialterm.ports import PortConfig, PortHandle, open_port

logger = logging.getLogger(__name__)

PortFactory = Callable[[PortConfig], PortHandle]
LogObserver = Callable[[str], None]

IO_ERRORS = (serial.SerialException, OSError)


class ListenerState(Enum):
    IDLE = "idle"
    LISTENING = "listening"


class SerialSession:
    def __init__(self, port_factory: PortFactory = open_port):
        self._port_factory = port_factory
        self._observers: List[LogObserver] = []

        self.port_config = PortConfig()
        self.handle: Optional[PortHandle] = None
        self.listener = ListenerState.IDLE
        self.tx_format = TxFormat.UTF8
        self.rx_formats: Set[RxFormat] = {RxFormat.HEX}
        self.command = ""
        self.theme = config.DEFAULT_THEME
        self.log: List[str] = []

    # ---------- log ----------
    def add_log_observer(self, fn: LogObserver):
        self._observers.append(fn)

    def append_log(self, line: str, level: int = logging.INFO):
        self.log.append(line)
        logger.log(level, line)
        for fn in self._observers:
            fn(line)

    # ---------- state queries ----------
    @property
    def is_open(self) -> bool:
        return self.handle is not None

    @property
    def is_listening(self) -> bool:
        return self.listener is ListenerState.LISTENING

    # ---------- selections ----------
    def select_port(self, name: str):
        self.port_config.port = name

    def select_baudrate(self, baudrate: int):
        if baudrate not in config.BAUD_RATES:
            self.append_log(f"Unsupported baud rate: {baudrate}", logging.WARNING); return
        self.port_config.baudrate = baudrate

    def select_data_bits(self, bits: int):
        if bits not in config.DATA_BITS:
            self.append_log(f"Unsupported data bits: {bits}", logging.WARNING); return
        self.port_config.bytesize = bits

    def select_parity(self, parity: str):
        if parity not in config.PARITIES:
            self.append_log(f"Unsupported parity: {parity}", logging.WARNING); return
        self.port_config.parity = parity

    def select_stop_bits(self, bits: int):
        if bits not in config.STOP_BITS:
            self.append_log(f"Unsupported stop bits: {bits}", logging.WARNING); return
        self.port_config.stopbits = bits

    def set_rx_format(self, fmt: RxFormat, on: bool):
        if on:
            self.rx_formats.add(fmt)
        else:
            self.rx_formats.discard(fmt)

    def select_theme(self, name: str):
        if name not in themes.THEME_NAMES:
            self.append_log(f"Unknown theme: {name}", logging.WARNING); return
        self.theme = name

    # ---------- port lifecycle ----------
    def open(self):
        name = self.port_config.port
        if not name:
            self.append_log("No port selected"); return

        was_listening = self.is_listening
        if self.handle is not None:
            # replacing: release the device before reopening it
            self._release()

        cfg = PortConfig(
            port=name,
            baudrate=self.port_config.baudrate,
            bytesize=self.port_config.bytesize,
            parity=self.port_config.parity,
            stopbits=self.port_config.stopbits,
            timeout_ms=config.READ_TIMEOUT_MS,
        )
        try:
            self.handle = self._port_factory(cfg)
        except IO_ERRORS + (ValueError,) as e:
            self.handle = None
            self.append_log(f"Failed to open port '{name}': {e}", logging.WARNING)
            return
        if was_listening:
            self.listener = ListenerState.LISTENING
        self.append_log(f"Successfully opened port '{name}'")

    def close(self):
        if self.handle is None:
            return
        self._release()
        self.append_log("Port closed")

    def _release(self):
        handle, self.handle = self.handle, None
        self.listener = ListenerState.IDLE
        try:
            handle.close()
        except IO_ERRORS as e:
            logger.warning("Error while closing port: %s", e)

    # ---------- transmit ----------
    def send(self):
        if self.handle is None:
            self.append_log("Port not open"); return

        cmd = self.command
        fmt = self.tx_format
        try:
            payload = encode_command(cmd, fmt)
        except OddLengthError:
            self.append_log("Invalid hex string", logging.WARNING); return
        except InvalidHexDigitError as e:
            self.append_log(f"Error decoding hex: {e}", logging.WARNING); return
        except UnicodeEncodeError as e:
            self.append_log(f"Error sending utf8 command: {e}", logging.WARNING); return

        try:
            self.handle.write_all(payload)
        except IO_ERRORS as e:
            self.append_log(f"Error sending {fmt.value} command: {e}", logging.WARNING); return

        self.append_log(f"Sent {len(payload)} bytes: {cmd}")

    # ---------- receive ----------
    def recv(self):
        if self.handle is None:
            self.append_log("Port not open"); return

        try:
            if self.handle.available() <= 0:
                return
            data = self.handle.read(config.RECV_BUFFER_SIZE)
        except IO_ERRORS as e:
            self.append_log(str(e), logging.WARNING); return

        n = len(data)
        # Render the whole fixed-size buffer; unread tail stays zero.
        buf = bytearray(config.RECV_BUFFER_SIZE)
        buf[:n] = data[:config.RECV_BUFFER_SIZE]
        for rendered in render_bytes(bytes(buf), self.rx_formats):
            self.append_log(f"Received {n} bytes: {rendered}")

    # ---------- listener ----------
    def toggle_listener(self):
        if self.handle is None:
            self.append_log("Port not open"); return
        if self.listener is ListenerState.IDLE:
            self.listener = ListenerState.LISTENING
            self.append_log("Listener started")
        else:
            self.listener = ListenerState.IDLE
            self.append_log("Listener stopped")
