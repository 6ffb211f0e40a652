"""
Authoritative state for the model dashboard.

Tracks the active model, a short most-recent-first history of ended models,
per-model usage counts and the time of the last received event. Every
operation runs under one lock, so event delivery and the projection tick
never interleave.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Callable, Optional

from modeldash.core.transport.messages import (
    ControllerInput,
    ModelEvent,
    SelectionEvent,
    StatisticsEvent,
    UnknownEvent,
)

from .types import ActiveModel, HistoryEntry, TrackerState

log = logging.getLogger(__name__)

HISTORY_CAPACITY = 3
STALE_TIMEOUT_SECONDS = 10.0


class ModelStateTracker:
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        history_capacity: int = HISTORY_CAPACITY,
        stale_timeout_seconds: float = STALE_TIMEOUT_SECONDS,
    ) -> None:
        self._clock = clock
        self._stale_timeout = stale_timeout_seconds
        self._lock = threading.Lock()

        self._active: Optional[ActiveModel] = None
        self._history: deque[HistoryEntry] = deque(maxlen=history_capacity)
        self._usage: dict[str, int] = {}
        self._last_event_received: Optional[float] = None
        self._last_actions: Optional[ControllerInput] = None

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    def handle_event(self, event: ModelEvent) -> None:
        if isinstance(event, SelectionEvent):
            self.on_selection(event.model, event.actions)
        elif isinstance(event, StatisticsEvent):
            self.on_statistics(event.model, event.counts)
        elif isinstance(event, UnknownEvent):
            log.debug("Ignoring unknown event tag %r", event.tag)
        else:
            raise TypeError(f"Unsupported event type: {type(event).__name__}")

    def on_selection(self, model_name: str, actions: Optional[ControllerInput] = None) -> None:
        with self._lock:
            now = self._clock()
            self._last_event_received = now
            if actions is not None:
                self._last_actions = actions

            if self._active is not None and self._active.name == model_name:
                return

            if self._active is not None:
                ended = HistoryEntry(name=self._active.name, duration=now - self._active.start_time)
                self._history.appendleft(ended)
                log.info("Model %s ended after %.3fs", ended.name, ended.duration)

            self._active = ActiveModel(name=model_name, start_time=now)
            # Predicted count; the next statistics report for this model overwrites it
            self._usage[model_name] = self._usage.get(model_name, 0) + 1
            log.info("Model %s selected", model_name)

    def on_statistics(self, model_name: str, counts: int) -> None:
        with self._lock:
            self._last_event_received = self._clock()
            self._usage[model_name] = counts

    def check_staleness(self, now: Optional[float] = None) -> bool:
        """
        Clear the active model when nothing arrived for longer than the stale
        timeout. Returns True when this call cleared it.

        Never-connected trackers are not stale, and the check does not move
        last_event_received.
        """
        with self._lock:
            if self._last_event_received is None:
                return False
            if now is None:
                now = self._clock()
            if now - self._last_event_received <= self._stale_timeout:
                return False
            if self._active is None:
                return False
            log.warning(
                "No events for %.1fs, presuming connection lost (was running %s)",
                now - self._last_event_received,
                self._active.name,
            )
            self._active = None
            self._last_actions = None
            return True

    def get_state(self) -> TrackerState:
        with self._lock:
            return TrackerState(
                active=self._active,
                history=tuple(self._history),
                usage=tuple(self._usage.items()),
                last_event_received=self._last_event_received,
                last_actions=self._last_actions,
            )
