from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from modeldash.core.transport.messages import ControllerInput


@dataclass(frozen=True)
class ActiveModel:
    """The model currently running, with the monotonic time it started."""
    name: str
    start_time: float


@dataclass(frozen=True)
class HistoryEntry:
    name: str
    duration: float  # seconds


@dataclass(frozen=True)
class TrackerState:
    """
    Read-only copy of the tracker state handed to readers.
    usage keeps insertion order as (name, count) pairs.
    """
    active: Optional[ActiveModel] = None
    history: Tuple[HistoryEntry, ...] = ()
    usage: Tuple[Tuple[str, int], ...] = ()
    last_event_received: Optional[float] = None
    last_actions: Optional[ControllerInput] = None

    def usage_dict(self) -> dict[str, int]:
        return dict(self.usage)
