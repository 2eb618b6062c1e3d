from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from backlight_ctl.paths import default_cache_dir, default_config_path
from backlight_ctl.system.backlight import SYSFS_ROOT

KEYS = ("device", "sysfs_root", "cache_dir")


class ConfigError(ValueError):
    pass


def load(path: str | Path | None = None) -> dict[str, Any]:
    """Read, validate and normalize a YAML config.

    With no explicit path the per-user default is used if it exists,
    otherwise an all-defaults config is returned.
    """

    if path is None:
        p = default_config_path()
        if not p.exists():
            return normalize({})
    else:
        p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config {p} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    validate(data)
    return normalize(data)


def validate(cfg: dict[str, Any]) -> None:
    for key, value in cfg.items():
        if key not in KEYS:
            raise ConfigError(f"Unknown config key: {key}")
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"{key} must be a string")
        if value is not None and not value.strip():
            raise ConfigError(f"{key} must not be empty")


def normalize(cfg: dict[str, Any]) -> dict[str, Any]:
    device = cfg.get("device")
    cfg["device"] = device.strip() if device else None

    root = cfg.get("sysfs_root")
    cfg["sysfs_root"] = Path(root.strip()).expanduser() if root else SYSFS_ROOT

    cache = cfg.get("cache_dir")
    cfg["cache_dir"] = Path(cache.strip()).expanduser() if cache else default_cache_dir()
    return cfg
