from collections import deque

import pytest
import serial

from serialterm import events as ev
from serialterm.router import EventRouter
from serialterm.session import SerialSession


class FakeHandle:
    """In-memory PortHandle: scripted reads, recorded writes."""

    def __init__(self):
        self.inbound = deque()      # chunks returned by successive reads
        self.written = bytearray()
        self.closed = False
        self.read_error = None
        self.write_error = None

    def feed(self, data: bytes):
        self.inbound.append(bytes(data))

    def available(self) -> int:
        return sum(len(c) for c in self.inbound)

    def read(self, size: int) -> bytes:
        if self.read_error:
            raise self.read_error
        chunk = self.inbound.popleft()
        if len(chunk) > size:
            self.inbound.appendleft(chunk[size:])
            chunk = chunk[:size]
        return chunk

    def write_all(self, payload: bytes) -> None:
        if self.write_error:
            raise self.write_error
        self.written.extend(payload)

    def close(self) -> None:
        self.closed = True


class FakeFactory:
    def __init__(self):
        self.opened = []        # (config, handle)
        self.fail_with = None

    def __call__(self, cfg):
        if self.fail_with:
            raise self.fail_with
        handle = FakeHandle()
        self.opened.append((cfg, handle))
        return handle

    @property
    def last(self) -> FakeHandle:
        return self.opened[-1][1]


@pytest.fixture
def factory():
    return FakeFactory()


@pytest.fixture
def session(factory):
    return SerialSession(port_factory=factory)


@pytest.fixture
def router(session):
    return EventRouter(session)


@pytest.fixture
def open_router(router, factory):
    """Router whose session has /dev/ttyFAKE0 open; log cleared."""
    router.dispatch(ev.SelectPort("/dev/ttyFAKE0"))
    router.dispatch(ev.OpenPort())
    router.session.log.clear()
    return router


@pytest.fixture
def serial_error():
    return serial.SerialException("device reports readiness to read but returned no data")
