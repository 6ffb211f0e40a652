from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from modeldash.shared.paths import log_path, ensure_app_dirs

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# Loggers that fire per inbound frame; at DEBUG they would fill the rotating
# file within minutes of a busy selector.
_PER_FRAME_LOGGERS = (
    "modeldash.core.transport.messages",
)


def setup_logging(level: int = logging.INFO) -> None:
    ensure_app_dirs()
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    log_file = RotatingFileHandler(str(log_path()), maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    log_file.setLevel(level)
    log_file.setFormatter(fmt)
    root.addHandler(log_file)

    for name in _PER_FRAME_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
