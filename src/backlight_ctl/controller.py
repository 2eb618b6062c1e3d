from __future__ import annotations

import logging
from dataclasses import dataclass

from backlight_ctl.adjust import Action, Value, apply, clamp, to_absolute
from backlight_ctl.system.backlight import Backlight
from backlight_ctl.system.cache import LastBrightness

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    device: str
    actual: int
    maximum: int

    def format(self) -> str:
        return f"device:{self.device}\nactual:{self.actual}\nmax:{self.maximum}\n"


@dataclass
class Controller:
    backlight: Backlight
    cache: LastBrightness

    def _report(self, actual: int, maximum: int) -> Report:
        return Report(device=str(self.backlight.sysfs_dir), actual=actual, maximum=maximum)

    def get(self) -> Report:
        actual = self.backlight.actual()
        maximum = self.backlight.maximum()
        self.cache.save(actual)
        return self._report(actual, maximum)

    def restore(self) -> Report:
        saved = self.cache.load()
        maximum = self.backlight.maximum()
        value = clamp(saved, maximum)
        if value != saved:
            log.warning("saved brightness %d out of range, clamped to %d", saved, value)
        self.backlight.set_brightness(value)
        log.info("restored %s to %d", self.backlight.name, value)
        return self._report(value, maximum)

    def adjust(self, action: Action, value: Value) -> Report:
        actual = self.backlight.actual()
        maximum = self.backlight.maximum()
        target = apply(action, actual, to_absolute(value, maximum), maximum)
        log.info(
            "%s %s: %d -> %d (max %d)", action.name.lower(), self.backlight.name, actual, target, maximum
        )
        self.backlight.set_brightness(target)
        return self.get()

    def set(self, value: Value) -> Report:
        return self.adjust(Action.SET, value)

    def inc(self, value: Value) -> Report:
        return self.adjust(Action.INC, value)

    def dec(self, value: Value) -> Report:
        return self.adjust(Action.DEC, value)
