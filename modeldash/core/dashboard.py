from __future__ import annotations

import logging
from typing import Callable, Optional

from modeldash.shared.config import AppConfig

from .projector.snapshot import PresentationSnapshot
from .projector.view_projector import ViewProjector
from .tracker.model_tracker import ModelStateTracker
from .transport.channel import EventChannel

log = logging.getLogger(__name__)


class Dashboard:
    """Owns the channel, tracker and projector and their lifecycle."""

    def __init__(
        self,
        config: AppConfig,
        channel: Optional[EventChannel] = None,
        tracker: Optional[ModelStateTracker] = None,
        projector: Optional[ViewProjector] = None,
    ) -> None:
        self.config = config
        self.tracker = tracker or ModelStateTracker(
            history_capacity=config.history_capacity,
            stale_timeout_seconds=config.stale_timeout_seconds,
        )
        self.channel = channel or EventChannel(
            config.websocket_url(),
            reconnect_delay_ms=config.reconnect_delay_ms,
        )
        self.projector = projector or ViewProjector(self.tracker, interval_ms=config.tick_interval_ms)
        self.channel.on_event(self.tracker.handle_event)
        self._running = False

    def on_snapshot(self, cb: Callable[[PresentationSnapshot], None]) -> None:
        self.projector.on_snapshot(cb)

    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        log.info("Dashboard starting, server %s", self.channel.url)
        self.channel.connect()
        self.projector.start()

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.projector.stop()
        self.channel.disconnect()
        log.info("Dashboard stopped")
