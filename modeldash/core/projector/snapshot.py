from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from modeldash.core.transport.messages import ControllerInput


@dataclass(frozen=True)
class ModelView:
    name: str
    detail: str


CONNECTING_VIEW = ModelView(name="None", detail="connecting...")


@dataclass(frozen=True)
class PresentationSnapshot:
    """
    Everything the window needs for one frame. live is False while no model
    is known to be running (never connected, reconnecting or stale).
    """
    current_model: ModelView
    previous_models: Tuple[ModelView, ...] = ()
    popular_models: Tuple[ModelView, ...] = ()
    live: bool = False
    controls: Optional[ControllerInput] = None
