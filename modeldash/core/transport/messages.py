"""
Decoding of the server's JSON envelopes into a closed set of events.

Envelope shapes:
  {"Selection": {"model": "Kickoff", "actions": {"throttle": 1.0, ..., "handbrake": false} | null}}
  {"Statistics": {"model": "Kickoff", "counts": 100}}

Anything else that parses as JSON becomes an UnknownEvent. Text that is not
JSON, or a known tag with an invalid body, is malformed and decodes to None.
An invalid "actions" value only loses the controller input, never the
selection itself.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, NonNegativeInt, StrictBool, ValidationError

log = logging.getLogger(__name__)

SELECTION_TAG = "Selection"
STATISTICS_TAG = "Statistics"


@dataclass(frozen=True)
class ControllerInput:
    """Controller state the selected model produced alongside its selection."""
    throttle: float
    steer: float
    pitch: float
    yaw: float
    roll: float
    jump: bool
    boost: bool
    handbrake: bool


@dataclass(frozen=True)
class SelectionEvent:
    model: str
    actions: Optional[ControllerInput] = None


@dataclass(frozen=True)
class StatisticsEvent:
    model: str
    counts: int


@dataclass(frozen=True)
class UnknownEvent:
    tag: Optional[str] = None


ModelEvent = Union[SelectionEvent, StatisticsEvent, UnknownEvent]


class _ActionsBody(BaseModel):
    throttle: float
    steer: float
    pitch: float
    yaw: float
    roll: float
    jump: StrictBool
    boost: StrictBool
    handbrake: StrictBool

    def to_input(self) -> ControllerInput:
        return ControllerInput(**self.model_dump())


class _SelectionBody(BaseModel):
    model: str
    actions: Any = None


class _StatisticsBody(BaseModel):
    model: str
    counts: NonNegativeInt


def decode_message(text: str) -> Optional[ModelEvent]:
    """Decode one inbound text frame. Returns None for malformed payloads."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        log.debug("Dropping non-JSON payload: %r", text)
        return None

    if not isinstance(data, dict) or len(data) != 1:
        return UnknownEvent()

    tag, body = next(iter(data.items()))
    try:
        if tag == SELECTION_TAG:
            sel = _SelectionBody.model_validate(body)
            return SelectionEvent(model=sel.model, actions=_controller_input(sel.actions))
        if tag == STATISTICS_TAG:
            stat = _StatisticsBody.model_validate(body)
            return StatisticsEvent(model=stat.model, counts=stat.counts)
    except ValidationError as e:
        log.debug("Dropping malformed %s payload: %s", tag, e)
        return None

    return UnknownEvent(tag=tag)


def _controller_input(actions: Any) -> Optional[ControllerInput]:
    if actions is None:
        return None
    try:
        return _ActionsBody.model_validate(actions).to_input()
    except ValidationError as e:
        log.debug("Ignoring invalid actions %r: %s", actions, e)
        return None
