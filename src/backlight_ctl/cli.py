from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from backlight_ctl import __version__
from backlight_ctl.adjust import ValueArgError, parse_value
from backlight_ctl.config import ConfigError, load
from backlight_ctl.controller import Controller, Report
from backlight_ctl.system.backlight import Backlight, DeviceError, resolve_device
from backlight_ctl.system.cache import LastBrightness

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="backlight", description="get or set backlight")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help="the device FILE (something like /sys/class/backlight/intel_backlight)",
    )
    ap.add_argument("-c", "--config", help="YAML config file")
    ap.add_argument("-v", "--verbose", action="count", default=0)

    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("get", aliases=["g"], help="get the actual backlight value")
    sub.add_parser("restore", aliases=["r"], help="restore the last known backlight value")
    for name, alias, help_text in (
        ("set", "s", "set the new backlight value"),
        ("inc", "i", "increment the backlight value"),
        ("dec", "d", "decrement the backlight value"),
    ):
        p = sub.add_parser(name, aliases=[alias], help=help_text)
        p.add_argument("value", nargs="*", metavar="n[%]")

    return ap


_ALIASES = {"g": "get", "r": "restore", "s": "set", "i": "inc", "d": "dec"}


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(name)s: %(levelname)s: %(message)s")


def _controller(args: argparse.Namespace) -> Controller:
    cfg = load(args.config)
    device = args.file or cfg["device"]
    backlight = Backlight(resolve_device(device, Path(cfg["sysfs_root"])))
    backlight.validate()

    cache = LastBrightness.for_device(Path(cfg["cache_dir"]), backlight.name)
    cache.prepare()
    return Controller(backlight, cache)


def run(args: argparse.Namespace) -> Report:
    cmd = _ALIASES.get(args.cmd, args.cmd)
    value = None
    # Parse the value before touching the device.
    if cmd in ("set", "inc", "dec"):
        if len(args.value) != 1:
            raise ValueArgError("a value to set is needed")
        value = parse_value(args.value[0])
    ctl = _controller(args)
    if cmd == "get":
        return ctl.get()
    if cmd == "restore":
        return ctl.restore()
    return getattr(ctl, cmd)(value)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    try:
        report = run(args)
    except (DeviceError, ValueArgError, ConfigError, OSError) as e:
        log.error("%s", e)
        return 1
    sys.stdout.write(report.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())
