from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "backlight"


def default_cache_dir(app_name: str = APP_NAME) -> Path:
    """Return the per-user directory holding last known brightness values.

    Uses XDG_CACHE_HOME when available, else ~/.cache.
    """

    base = os.environ.get("XDG_CACHE_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".cache"
    return root / app_name


def default_config_path(app_name: str = APP_NAME) -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".config"
    return root / app_name / "config.yaml"
