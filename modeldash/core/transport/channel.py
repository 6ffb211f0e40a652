"""
Persistent websocket channel to the model selection server.

Keeps one QWebSocket open and reopens it a fixed delay after every
unexpected close or error, forever. Decoded events are handed to a single
handler synchronously, in arrival order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QTimer, QUrl
from PySide6.QtWebSockets import QWebSocket

from .messages import ModelEvent, decode_message

log = logging.getLogger(__name__)


def _single_shot_timer() -> QTimer:
    timer = QTimer()
    timer.setSingleShot(True)
    return timer


class EventChannel:
    """Self-healing websocket that emits ModelEvent values."""

    def __init__(
        self,
        url: str,
        reconnect_delay_ms: int = 1000,
        socket_factory: Optional[Callable[[], Any]] = None,
        timer_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._url = url
        self._reconnect_delay_ms = reconnect_delay_ms
        self._socket_factory = socket_factory or QWebSocket
        self._socket: Optional[Any] = None
        self._connected = False
        self._should_reconnect = False
        self._handler: Optional[Callable[[ModelEvent], None]] = None

        self._reconnect_timer = (timer_factory or _single_shot_timer)()
        self._reconnect_timer.timeout.connect(self._on_reconnect_timer)

    @property
    def url(self) -> str:
        return self._url

    def on_event(self, handler: Callable[[ModelEvent], None]) -> None:
        self._handler = handler

    def is_connected(self) -> bool:
        return self._socket is not None and self._connected

    def connect(self) -> None:
        self._should_reconnect = True
        if self._socket is not None:
            return
        self._reconnect_timer.stop()
        self._open()

    def disconnect(self) -> None:
        self._should_reconnect = False
        self._reconnect_timer.stop()
        sock = self._socket
        self._drop_socket()
        if sock is not None:
            log.info("Closing connection to %s", self._url)
            sock.close()
            sock.deleteLater()

    def _open(self) -> None:
        sock = self._socket_factory()
        sock.connected.connect(lambda s=sock: self._on_connected(s))
        sock.disconnected.connect(lambda s=sock: self._on_closed(s))
        sock.errorOccurred.connect(lambda err, s=sock: self._on_error(s, err))
        sock.textMessageReceived.connect(lambda text, s=sock: self._on_text(s, text))
        self._socket = sock
        self._connected = False
        log.info("Connecting to %s", self._url)
        sock.open(QUrl(self._url))

    def _drop_socket(self) -> None:
        # Callers must deleteLater() the dropped socket
        self._socket = None
        self._connected = False

    def _on_connected(self, sock: Any) -> None:
        if sock is not self._socket:
            return
        self._connected = True
        log.info("Connected to %s", self._url)

    def _on_closed(self, sock: Any) -> None:
        # Stale sockets (already replaced or closed on purpose) are ignored
        if sock is not self._socket:
            return
        self._drop_socket()
        sock.deleteLater()
        log.info("Socket is closed. Reconnect will be attempted in %d ms.", self._reconnect_delay_ms)
        self._schedule_reconnect()

    def _on_error(self, sock: Any, err: Any) -> None:
        if sock is not self._socket:
            return
        log.warning("Socket encountered error: %s (%s)", sock.errorString() or "Unknown connection error", err)
        self._drop_socket()
        sock.close()
        sock.deleteLater()
        self._schedule_reconnect()

    def _on_text(self, sock: Any, text: str) -> None:
        if sock is not self._socket:
            return
        event = decode_message(text)
        if event is None or self._handler is None:
            return
        try:
            self._handler(event)
        except Exception:
            log.exception("Event handler failed for %r", event)

    def _schedule_reconnect(self) -> None:
        if not self._should_reconnect or self._reconnect_timer.isActive():
            return
        self._reconnect_timer.start(self._reconnect_delay_ms)

    def _on_reconnect_timer(self) -> None:
        if not self._should_reconnect or self._socket is not None:
            return
        self._open()
