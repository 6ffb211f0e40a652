from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "ModelDashboard"
CONFIG_FILE = "config.json"
LOG_FILE = "dashboard.log"


def app_data_dir() -> Path:
    """Per-user settings dir: %APPDATA% on Windows, the home dir elsewhere."""
    base = os.environ.get("APPDATA") or str(Path.home())
    return Path(base) / APP_NAME


def config_path() -> Path:
    return app_data_dir() / CONFIG_FILE


def logs_dir() -> Path:
    return app_data_dir() / "logs"


def log_path() -> Path:
    return logs_dir() / LOG_FILE


def ensure_app_dirs() -> None:
    logs_dir().mkdir(parents=True, exist_ok=True)
