#!/usr/bin/env python3
"""
SerialTerm: open a serial port, send UTF-8 or hex frames, watch what comes back.

Quick test (no hardware): type loop:// as the port, open it, start the listener, send "hello".
On Linux the user needs to be in the group that owns the tty devices (dialout or uucp).
"""

from __future__ import annotations
import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QTimer, Slot
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QComboBox, QCheckBox, QRadioButton, QButtonGroup, QLineEdit, QPlainTextEdit, QStatusBar,
)

from serialterm import config, events as ev
from serialterm.codec import RxFormat, TxFormat
from serialterm.ports import EnumerationError, list_port_names
from serialterm.router import EventRouter
from serialterm.session import SerialSession
from serialterm.themes import THEME_NAMES, THEMES, ThemeColors

logger = logging.getLogger(__name__)


# ---------------- Theme helpers ----------------
def build_palette(colors: ThemeColors) -> QPalette:
    pal = QPalette()
    bg, surface, text = QColor(colors.background), QColor(colors.surface), QColor(colors.text)
    pal.setColor(QPalette.Window, bg); pal.setColor(QPalette.WindowText, text)
    pal.setColor(QPalette.Base, surface); pal.setColor(QPalette.AlternateBase, bg)
    pal.setColor(QPalette.Text, text); pal.setColor(QPalette.PlaceholderText, QColor(colors.primary))
    pal.setColor(QPalette.Button, surface); pal.setColor(QPalette.ButtonText, text)
    pal.setColor(QPalette.Highlight, QColor(colors.primary)); pal.setColor(QPalette.HighlightedText, bg)
    pal.setColor(QPalette.ToolTipBase, surface); pal.setColor(QPalette.ToolTipText, text)
    return pal


def button_style(color: str) -> str:
    return f"QPushButton {{ background: {color}; color: #FFFFFF; padding: 6px 10px; }}"


# ---------------- Main window ----------------
class MainWindow(QMainWindow):
    def __init__(self, port_names: List[str], session: Optional[SerialSession] = None):
        super().__init__()
        self.setWindowTitle(f"{config.APP_NAME} {config.VERSION}")
        self.resize(*config.WINDOW_SIZE); self.setMinimumSize(*config.MIN_WINDOW_SIZE)

        self.session = session or SerialSession()
        self.router = EventRouter(self.session)
        self._applied_theme = None
        self._shown = None

        # Listener tick: posts Recv while the session is listening
        self.tick = QTimer(self); self.tick.setInterval(config.LISTENER_INTERVAL_MS)
        self.tick.timeout.connect(lambda: self.router.dispatch(ev.Recv()))

        self._build(port_names)
        self._wire()

        self.status = QStatusBar(); self.setStatusBar(self.status)
        self.conn_lbl = QLabel("CLOSED")
        self.status.addPermanentWidget(self.conn_lbl)

        self.router.add_log_observer(self._append_log)
        self.router.add_state_observer(self._refresh)
        self._refresh()

    def _build(self, port_names: List[str]):
        s = self.session
        root = QWidget(); layout = QVBoxLayout(root); layout.setSpacing(12)

        # Row 1: port + open/close + listener
        row1 = QHBoxLayout()
        self.port_combo = QComboBox(); self.port_combo.setEditable(True)  # allow loop://
        self.port_combo.addItems(port_names); self.port_combo.setCurrentIndex(-1)
        self.port_combo.lineEdit().setPlaceholderText("Select a port...")
        self.port_btn = QPushButton("Open Port")
        self.listen_btn = QPushButton("Start Listener")
        row1.addWidget(self.port_combo, 1); row1.addWidget(self.port_btn); row1.addWidget(self.listen_btn)

        # Row 2: line parameters
        row2 = QHBoxLayout()
        self.baud_combo = QComboBox(); self.baud_combo.addItems([str(b) for b in config.BAUD_RATES])
        self.baud_combo.setCurrentText(str(s.port_config.baudrate))
        self.bytesize_combo = QComboBox(); self.bytesize_combo.addItems([str(b) for b in config.DATA_BITS])
        self.bytesize_combo.setCurrentText(str(s.port_config.bytesize))
        self.parity_combo = QComboBox()
        for code in config.PARITIES:
            self.parity_combo.addItem(config.PARITY_NAMES[code], code)
        self.parity_combo.setCurrentIndex(self.parity_combo.findData(s.port_config.parity))
        self.stopbits_combo = QComboBox(); self.stopbits_combo.addItems([str(b) for b in config.STOP_BITS])
        self.stopbits_combo.setCurrentText(str(s.port_config.stopbits))
        for lbl, w in (("Baud:", self.baud_combo), ("Data:", self.bytesize_combo),
                       ("Parity:", self.parity_combo), ("Stop:", self.stopbits_combo)):
            row2.addWidget(QLabel(lbl)); row2.addWidget(w)
        row2.addStretch(1)

        # Row 3: receive formats
        row3 = QHBoxLayout()
        self.rx_hex_chk = QCheckBox("HEX"); self.rx_hex_chk.setChecked(RxFormat.HEX in s.rx_formats)
        self.rx_bin_chk = QCheckBox("BIN"); self.rx_bin_chk.setChecked(RxFormat.BINARY in s.rx_formats)
        self.rx_utf8_chk = QCheckBox("UTF-8"); self.rx_utf8_chk.setChecked(RxFormat.UTF8 in s.rx_formats)
        row3.addWidget(QLabel("Receive as:"))
        row3.addWidget(self.rx_hex_chk); row3.addWidget(self.rx_bin_chk); row3.addWidget(self.rx_utf8_chk)
        row3.addStretch(1)

        # Log view
        self.log_view = QPlainTextEdit(); self.log_view.setReadOnly(True)
        mono = self.log_view.font()
        mono.setFamilies(["Consolas", "Menlo", "Courier New", "Monospace"])
        self.log_view.setFont(mono)

        # Row 4: transmit format
        row4 = QHBoxLayout()
        self.tx_utf8_radio = QRadioButton("UTF-8"); self.tx_hex_radio = QRadioButton("HEX")
        self.tx_group = QButtonGroup(self)
        self.tx_group.addButton(self.tx_utf8_radio); self.tx_group.addButton(self.tx_hex_radio)
        (self.tx_hex_radio if s.tx_format is TxFormat.HEX else self.tx_utf8_radio).setChecked(True)
        row4.addWidget(QLabel("Command type:")); row4.addWidget(self.tx_utf8_radio); row4.addWidget(self.tx_hex_radio)
        row4.addStretch(1)

        # Row 5: command + send
        row5 = QHBoxLayout()
        self.input_edit = QLineEdit(); self.input_edit.setPlaceholderText("Enter command...")
        self.send_btn = QPushButton("Send")
        row5.addWidget(self.input_edit, 1); row5.addWidget(self.send_btn)

        # Row 6: theme
        row6 = QHBoxLayout()
        self.theme_combo = QComboBox(); self.theme_combo.addItems(list(THEME_NAMES))
        self.theme_combo.setCurrentText(s.theme); self.theme_combo.setMinimumWidth(200)
        row6.addWidget(self.theme_combo); row6.addStretch(1)

        layout.addLayout(row1); layout.addLayout(row2); layout.addLayout(row3)
        layout.addWidget(self.log_view, 1)
        layout.addLayout(row4); layout.addLayout(row5); layout.addLayout(row6)
        self.setCentralWidget(root)

    def _wire(self):
        post = self.router.dispatch
        self.port_combo.currentTextChanged.connect(lambda t: post(ev.SelectPort(t)))
        self.port_btn.clicked.connect(self._toggle_port)
        self.listen_btn.clicked.connect(lambda: post(ev.ToggleListener()))

        self.baud_combo.currentTextChanged.connect(lambda t: post(ev.SelectBaud(int(t))))
        self.bytesize_combo.currentTextChanged.connect(lambda t: post(ev.SelectDataBits(int(t))))
        self.parity_combo.currentIndexChanged.connect(
            lambda i: post(ev.SelectParity(self.parity_combo.itemData(i))))
        self.stopbits_combo.currentTextChanged.connect(lambda t: post(ev.SelectStopBits(int(t))))

        self.rx_hex_chk.toggled.connect(lambda on: post(ev.ToggleRxHex(on)))
        self.rx_bin_chk.toggled.connect(lambda on: post(ev.ToggleRxBin(on)))
        self.rx_utf8_chk.toggled.connect(lambda on: post(ev.ToggleRxUtf8(on)))

        self.tx_hex_radio.toggled.connect(self._on_hex_mode_toggled)

        self.input_edit.textChanged.connect(lambda t: post(ev.ChangeCommand(t)))
        self.input_edit.returnPressed.connect(lambda: post(ev.Send()))
        self.send_btn.clicked.connect(lambda: post(ev.Send()))

        self.theme_combo.textActivated.connect(lambda t: post(ev.SelectTheme(t)))
        self.theme_combo.highlighted.connect(lambda i: post(ev.HoverTheme(self.theme_combo.itemText(i))))

    # Slots
    @Slot(bool)
    def _on_hex_mode_toggled(self, on: bool):
        self.router.dispatch(ev.SelectTxFormat(TxFormat.HEX if on else TxFormat.UTF8))

    @Slot()
    def _toggle_port(self):
        self.router.dispatch(ev.ClosePort() if self.session.is_open else ev.OpenPort())

    @Slot(str)
    def _append_log(self, line: str):
        self.log_view.appendPlainText(line)
        self.log_view.ensureCursorVisible()
        sb = self.log_view.verticalScrollBar(); sb.setValue(sb.maximum())

    def _refresh(self):
        s = self.session
        colors = THEMES[s.theme]

        # Listener tick follows the session state
        if s.is_listening and not self.tick.isActive():
            self.tick.start()
        elif not s.is_listening and self.tick.isActive():
            self.tick.stop()

        shown = (s.is_open, s.is_listening, s.theme, s.port_config.describe())
        if shown == self._shown:
            return
        self._shown = shown

        if s.is_open:
            self.port_btn.setText("Close Port"); self.port_btn.setStyleSheet(button_style(colors.danger))
            self.conn_lbl.setText(f"OPEN — {s.port_config.describe()}")
        else:
            self.port_btn.setText("Open Port"); self.port_btn.setStyleSheet("")
            self.conn_lbl.setText("CLOSED")
        self.port_combo.setEnabled(not s.is_open)

        if s.is_listening:
            self.listen_btn.setText("Stop Listener"); self.listen_btn.setStyleSheet(button_style(colors.danger))
        else:
            self.listen_btn.setText("Start Listener"); self.listen_btn.setStyleSheet(button_style(colors.success))
        self.listen_btn.setEnabled(s.is_open); self.send_btn.setEnabled(s.is_open)
        self.send_btn.setStyleSheet(button_style(colors.success))

        if s.theme != self._applied_theme:
            self._apply_theme(colors)
            self._applied_theme = s.theme

    def _apply_theme(self, colors: ThemeColors):
        app = QApplication.instance()
        if app is not None:
            app.setPalette(build_palette(colors))
        self.log_view.setStyleSheet(
            f"QPlainTextEdit {{ border: 1px solid {colors.success}; border-radius: 3px; padding: 6px; }}")

    def closeEvent(self, e):
        try:
            self.router.dispatch(ev.ClosePort()); self.tick.stop()
        finally:
            super().closeEvent(e)


# --------------- main ---------------
def main():
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

    try:
        port_names = list_port_names()
    except EnumerationError as e:
        print(f"{config.APP_NAME}: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info("Found %d serial port(s): %s", len(port_names), ", ".join(port_names) or "-")

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    win = MainWindow(port_names)
    win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
