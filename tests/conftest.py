from __future__ import annotations

import pytest


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSignal:
    def __init__(self) -> None:
        self._slots = []

    def connect(self, slot) -> None:
        self._slots.append(slot)

    def emit(self, *args) -> None:
        for slot in list(self._slots):
            slot(*args)


class FakeTimer:
    """Stands in for QTimer; fire() delivers a timeout by hand."""

    def __init__(self) -> None:
        self.timeout = FakeSignal()
        self.interval = None
        self.starts = 0
        self._active = False

    def start(self, ms: int) -> None:
        self.interval = ms
        self.starts += 1
        self._active = True

    def stop(self) -> None:
        self._active = False

    def isActive(self) -> bool:
        return self._active

    def fire(self) -> None:
        self._active = False
        self.timeout.emit()


class FakeSocket:
    """Stands in for QWebSocket with the signals the channel listens to."""

    def __init__(self) -> None:
        self.connected = FakeSignal()
        self.disconnected = FakeSignal()
        self.errorOccurred = FakeSignal()
        self.textMessageReceived = FakeSignal()
        self.opened_url = None
        self.close_calls = 0
        self.delete_calls = 0
        self.is_open = False

    def open(self, url) -> None:
        self.opened_url = url.toString()

    def accept(self) -> None:
        self.is_open = True
        self.connected.emit()

    def close(self) -> None:
        self.close_calls += 1
        was_open = self.is_open
        self.is_open = False
        if was_open:
            self.disconnected.emit()

    def deleteLater(self) -> None:
        self.delete_calls += 1

    def errorString(self) -> str:
        return "connection refused"

    def receive(self, text: str) -> None:
        self.textMessageReceived.emit(text)

    def drop(self) -> None:
        self.is_open = False
        self.disconnected.emit()

    def fail(self) -> None:
        self.errorOccurred.emit(1)


class SocketFactory:
    def __init__(self) -> None:
        self.sockets: list[FakeSocket] = []

    def __call__(self) -> FakeSocket:
        sock = FakeSocket()
        self.sockets.append(sock)
        return sock

    @property
    def last(self) -> FakeSocket:
        return self.sockets[-1]


class TimerFactory:
    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self) -> FakeTimer:
        timer = FakeTimer()
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sockets() -> SocketFactory:
    return SocketFactory()


@pytest.fixture
def timers() -> TimerFactory:
    return TimerFactory()
