from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

SYSFS_ROOT = Path("/sys/class/backlight")

ATTRIBUTES = ("actual_brightness", "max_brightness", "brightness")


class DeviceError(RuntimeError):
    pass


def read_int(path: Path) -> int:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeviceError(f"cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise DeviceError(f"{path} does not hold an integer: {e}") from e
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise DeviceError(f"{path} does not hold an integer: {raw.strip()!r}") from e
    log.debug("read %s = %d", path, value)
    return value


def write_int(path: Path, value: int) -> None:
    try:
        path.write_text(f"{int(value)}\n", encoding="utf-8")
    except OSError as e:
        raise DeviceError(f"cannot write {path}: {e.strerror or e}") from e
    log.debug("wrote %s = %d", path, value)


def discover(root: Path = SYSFS_ROOT) -> Path:
    """Return the first device directory under ``root``."""

    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        raise DeviceError(f"no backlight devices under {root}: {e.strerror or e}") from e
    if not entries:
        raise DeviceError(f"no backlight devices under {root}")
    log.info("using backlight device %s", entries[0])
    return entries[0]


def resolve_device(spec: str | Path | None, root: Path = SYSFS_ROOT) -> Path:
    if spec is None or str(spec) == "":
        return discover(root)
    s = str(spec)
    # A bare name like "intel_backlight" is an entry of the sysfs root; "./name" is local.
    if "/" not in s and s not in (".", ".."):
        return root / s
    return Path(spec)


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def name(self) -> str:
        return self.sysfs_dir.name

    @property
    def _actual_brightness(self) -> Path:
        return self.sysfs_dir / "actual_brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    def validate(self) -> None:
        if not self.sysfs_dir.exists():
            raise DeviceError(f"{self.sysfs_dir} must be an existing device folder")
        if not self.sysfs_dir.is_dir():
            raise DeviceError(f"{self.sysfs_dir} should point to a device folder")
        for attr in ATTRIBUTES:
            if not (self.sysfs_dir / attr).exists():
                raise DeviceError(f"device's {attr} file must exist in {self.sysfs_dir}")

    def actual(self) -> int:
        return read_int(self._actual_brightness)

    def maximum(self) -> int:
        return read_int(self._max_brightness)

    def set_brightness(self, value: int) -> None:
        write_int(self._brightness, value)
