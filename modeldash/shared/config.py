from __future__ import annotations

import logging
import os
from typing import Callable, Mapping, Optional

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

ENV_PREFIX = "MODELDASH_"


def websocket_url(origin: str, path: str = "/ws") -> str:
    """Map an HTTP origin to the matching websocket endpoint (https -> wss)."""
    origin = origin.rstrip("/")
    scheme, sep, rest = origin.partition("://")
    if not sep:
        scheme, rest = "http", origin
    ws_scheme = "wss" if scheme.lower() in ("https", "wss") else "ws"
    if not path.startswith("/"):
        path = "/" + path
    return f"{ws_scheme}://{rest}{path}"


class AppConfig(BaseModel):
    server_origin: str = "http://127.0.0.1:3000"
    ws_path: str = "/ws"
    reconnect_delay_ms: int = Field(default=1000, ge=1)
    stale_timeout_seconds: float = Field(default=10.0, gt=0)
    tick_interval_ms: int = Field(default=100, ge=1)
    history_capacity: int = Field(default=3, ge=1)
    dark_mode: bool = True

    def websocket_url(self) -> str:
        return websocket_url(self.server_origin, self.ws_path)


_ENV_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "SERVER_ORIGIN": ("server_origin", str),
    "WS_PATH": ("ws_path", str),
    "RECONNECT_DELAY_MS": ("reconnect_delay_ms", int),
    "STALE_TIMEOUT_SECONDS": ("stale_timeout_seconds", float),
}


def apply_env_overrides(cfg: AppConfig, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Return a copy of cfg with MODELDASH_* environment variables applied.

    Values that fail to parse or validate are logged and skipped; the
    configured value stays in place.
    """
    env = os.environ if environ is None else environ
    updated = cfg
    for suffix, (field, parse) in _ENV_FIELDS.items():
        name = ENV_PREFIX + suffix
        raw = env.get(name)
        if raw is None or raw == "":
            continue
        try:
            candidate = AppConfig.model_validate({**updated.model_dump(), field: parse(raw)})
        except ValueError:
            log.warning("Ignoring %s=%r: not a valid value for %s", name, raw, field)
            continue
        updated = candidate
        log.info("Config override from %s: %s=%r", name, field, getattr(updated, field))
    return updated
