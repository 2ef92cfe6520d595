"""
Event router: the single point where session state changes.

UI gestures and listener ticks are posted with dispatch(); events are queued
and each one is applied to completion before the next is taken.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import Callable, Deque, Dict, List

from serialterm import events as ev
from serialterm.codec import RxFormat
from serialterm.session import LogObserver, SerialSession

logger = logging.getLogger(__name__)


class EventRouter:
    def __init__(self, session: SerialSession):
        self.session = session
        self._queue: Deque[object] = deque()
        self._draining = False
        self._after: List[Callable[[], None]] = []
        s = session
        self._handlers: Dict[type, Callable[[object], None]] = {
            ev.SelectPort:      lambda e: s.select_port(e.name),
            ev.SelectBaud:      lambda e: s.select_baudrate(e.baudrate),
            ev.SelectDataBits:  lambda e: s.select_data_bits(e.bits),
            ev.SelectParity:    lambda e: s.select_parity(e.parity),
            ev.SelectStopBits:  lambda e: s.select_stop_bits(e.bits),
            ev.ChangeCommand:   lambda e: setattr(s, "command", e.text),
            ev.SelectTxFormat:  lambda e: setattr(s, "tx_format", e.fmt),
            ev.ToggleRxUtf8:    lambda e: s.set_rx_format(RxFormat.UTF8, e.on),
            ev.ToggleRxHex:     lambda e: s.set_rx_format(RxFormat.HEX, e.on),
            ev.ToggleRxBin:     lambda e: s.set_rx_format(RxFormat.BINARY, e.on),
            ev.SelectTheme:     lambda e: s.select_theme(e.theme),
            ev.HoverTheme:      lambda e: s.select_theme(e.theme),
            ev.OpenPort:        lambda e: s.open(),
            ev.ClosePort:       lambda e: s.close(),
            ev.Send:            lambda e: s.send(),
            ev.Recv:            lambda e: s.recv(),
            ev.ToggleListener:  lambda e: s.toggle_listener(),
        }

    def add_log_observer(self, fn: LogObserver):
        self.session.add_log_observer(fn)

    def add_state_observer(self, fn: Callable[[], None]):
        """fn() runs after every processed event, e.g. to refresh widgets or arm the tick."""
        self._after.append(fn)

    def dispatch(self, event):
        self._queue.append(event)
        if self._draining:
            # posted from inside a handler or observer; picked up by the running drain
            return
        self._draining = True
        try:
            while self._queue:
                self._apply(self._queue.popleft())
        finally:
            self._draining = False

    def _apply(self, event):
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.error("Unroutable event: %r", event)
            return
        try:
            handler(event)
        except Exception as e:
            logger.exception("Error while handling %r", event)
            self.session.append_log(f"Internal error: {e}", logging.ERROR)
        for fn in self._after:
            fn()
