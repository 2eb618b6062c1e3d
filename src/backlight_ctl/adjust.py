from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_VALUE_RE = re.compile(r"([0-9]+)(%?)")


class ValueArgError(ValueError):
    pass


class Action(enum.Enum):
    SET = 0
    INC = 1
    DEC = -1


@dataclass(frozen=True)
class Value:
    amount: int
    percent: bool = False


def parse_value(arg: str | None) -> Value:
    """Parse ``n`` or ``n%``."""

    if arg is None:
        raise ValueArgError("a value to set is needed")
    m = _VALUE_RE.fullmatch(arg.strip())
    if m is None:
        raise ValueArgError("a valid value to set is needed")
    return Value(amount=int(m.group(1)), percent=m.group(2) == "%")


def to_absolute(value: Value, maximum: int) -> int:
    if not value.percent:
        return value.amount
    if value.amount <= 0:
        return 0
    if value.amount >= 100:
        return maximum
    return maximum * value.amount // 100


def clamp(value: int, maximum: int) -> int:
    return max(0, min(value, maximum))


def apply(action: Action, actual: int, amount: int, maximum: int) -> int:
    if action is Action.INC:
        actual += amount
    elif action is Action.DEC:
        actual -= amount
    else:
        actual = amount
    return clamp(actual, maximum)
