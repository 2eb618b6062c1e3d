from __future__ import annotations

from pathlib import Path

import pytest


def make_device(root: Path, name: str = "intel_backlight", actual: int = 400, maximum: int = 1000) -> Path:
    dev = root / name
    dev.mkdir(parents=True)
    (dev / "actual_brightness").write_text(f"{actual}\n", encoding="utf-8")
    (dev / "max_brightness").write_text(f"{maximum}\n", encoding="utf-8")
    (dev / "brightness").write_text(f"{actual}\n", encoding="utf-8")
    return dev


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    root = tmp_path / "sys" / "class" / "backlight"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def device(sysfs_root: Path) -> Path:
    return make_device(sysfs_root)
