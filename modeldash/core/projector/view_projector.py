"""
Periodic projection of tracker state into presentation snapshots.

The tick runs on its own timer so the current model's elapsed time keeps
moving between events, and so staleness is noticed while the stream is
silent.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from PySide6.QtCore import QTimer

from modeldash.core.tracker.model_tracker import ModelStateTracker
from modeldash.core.tracker.types import HistoryEntry

from .snapshot import CONNECTING_VIEW, ModelView, PresentationSnapshot

log = logging.getLogger(__name__)

TICK_INTERVAL_MS = 100


def format_seconds(seconds: float) -> str:
    return f"{seconds:.3f}s"


def history_view(history: Iterable[HistoryEntry]) -> Tuple[ModelView, ...]:
    return tuple(ModelView(name=h.name, detail=format_seconds(h.duration)) for h in history)


def popularity_view(usage: Iterable[Tuple[str, int]]) -> Tuple[ModelView, ...]:
    """
    Usage share per model, highest count first. Ties keep insertion order.
    Empty when nothing has been counted yet.
    """
    pairs = list(usage)
    total = sum(count for _, count in pairs)
    if total <= 0:
        return ()
    ranked = sorted(pairs, key=lambda p: p[1], reverse=True)
    return tuple(ModelView(name=name, detail=f"{count / total * 100:.2f}%") for name, count in ranked)


class ViewProjector:
    def __init__(
        self,
        tracker: ModelStateTracker,
        interval_ms: int = TICK_INTERVAL_MS,
        clock: Optional[Callable[[], float]] = None,
        timer_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._tracker = tracker
        self._interval_ms = interval_ms
        self._clock = clock or tracker.clock
        self._snapshot_cb: Optional[Callable[[PresentationSnapshot], None]] = None

        self._previous: Tuple[ModelView, ...] = ()
        self._popular: Tuple[ModelView, ...] = ()
        self._latest: Optional[PresentationSnapshot] = None

        self._timer = (timer_factory or QTimer)()
        self._timer.timeout.connect(self._on_timeout)

    def on_snapshot(self, cb: Callable[[PresentationSnapshot], None]) -> None:
        self._snapshot_cb = cb

    @property
    def latest(self) -> Optional[PresentationSnapshot]:
        return self._latest

    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start(self._interval_ms)

    def stop(self) -> None:
        self._timer.stop()

    def tick(self, now: Optional[float] = None) -> PresentationSnapshot:
        self._tracker.check_staleness(now)
        state = self._tracker.get_state()
        if now is None:
            # start_time <= now once the state is taken
            now = self._clock()

        if state.active is None:
            # Keep the last known lists so the window can still show them greyed out
            snapshot = PresentationSnapshot(
                current_model=CONNECTING_VIEW,
                previous_models=self._previous,
                popular_models=self._popular,
                live=False,
            )
        else:
            self._previous = history_view(state.history)
            self._popular = popularity_view(state.usage)
            snapshot = PresentationSnapshot(
                current_model=ModelView(
                    name=state.active.name,
                    detail=format_seconds(max(0.0, now - state.active.start_time)),
                ),
                previous_models=self._previous,
                popular_models=self._popular,
                live=True,
                controls=state.last_actions,
            )

        self._latest = snapshot
        self._publish(snapshot)
        return snapshot

    def _publish(self, snapshot: PresentationSnapshot) -> None:
        if self._snapshot_cb is None:
            return
        try:
            self._snapshot_cb(snapshot)
        except Exception:
            log.exception("Snapshot consumer failed")

    def _on_timeout(self) -> None:
        try:
            self.tick()
        except Exception:
            log.exception("Projection tick failed")
