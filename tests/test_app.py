import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from serialterm import app as serialterm_app
from serialterm import events as ev
from serialterm.codec import TxFormat
from serialterm.ports import EnumerationError
from serialterm.session import SerialSession


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(qapp, factory):
    win = serialterm_app.MainWindow([], SerialSession(port_factory=factory))
    yield win
    win.tick.stop()
    win.deleteLater()


def test_enumeration_failure_is_fatal(monkeypatch, capsys):
    def boom():
        raise EnumerationError("Unable to enumerate serial ports: no sysfs")

    monkeypatch.setattr(serialterm_app, "list_port_names", boom)
    with pytest.raises(SystemExit) as exc:
        serialterm_app.main()
    assert exc.value.code == 1
    assert "no sysfs" in capsys.readouterr().err


def test_tick_runs_only_while_listening(window):
    post = window.router.dispatch
    assert not window.tick.isActive()

    post(ev.ToggleListener())
    assert not window.tick.isActive()

    post(ev.SelectPort("/dev/ttyFAKE0")); post(ev.OpenPort())
    assert not window.tick.isActive()

    post(ev.ToggleListener())
    assert window.tick.isActive()
    assert window.tick.interval() == 10

    post(ev.ToggleListener())
    assert not window.tick.isActive()

    post(ev.ToggleListener())
    assert window.tick.isActive()
    post(ev.ClosePort())
    assert not window.tick.isActive()
    assert window.session.log[-1] == "Port closed"


def test_widgets_follow_session_state(window):
    post = window.router.dispatch
    assert window.port_btn.text() == "Open Port"
    assert not window.send_btn.isEnabled()

    post(ev.SelectPort("/dev/ttyFAKE0")); post(ev.OpenPort())
    assert window.port_btn.text() == "Close Port"
    assert window.send_btn.isEnabled()
    assert window.conn_lbl.text().startswith("OPEN")

    post(ev.ToggleListener())
    assert window.listen_btn.text() == "Stop Listener"
    assert window.log_view.toPlainText().splitlines()[-1] == "Listener started"


def test_hex_radio_selects_tx_format(window):
    window.tx_hex_radio.setChecked(True)
    assert window.session.tx_format is TxFormat.HEX
    window.tx_utf8_radio.setChecked(True)
    assert window.session.tx_format is TxFormat.UTF8
