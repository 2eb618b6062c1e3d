from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backlight_ctl.system.backlight import DeviceError, read_int, write_int


@dataclass(frozen=True)
class LastBrightness:
    """Last observed brightness of one device, kept in a per-user cache file."""

    path: Path

    @classmethod
    def for_device(cls, cache_dir: Path, device: str) -> LastBrightness:
        return cls(cache_dir / device)

    def prepare(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DeviceError(f"cannot create cache dir {self.path.parent}: {e.strerror or e}") from e

    def save(self, value: int) -> None:
        write_int(self.path, value)

    def load(self) -> int:
        if not self.path.exists():
            raise DeviceError(f"no saved brightness in {self.path}, run 'get' first")
        return read_int(self.path)
