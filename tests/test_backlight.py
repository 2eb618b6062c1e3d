from __future__ import annotations

from pathlib import Path

import pytest

from backlight_ctl.system.backlight import (
    Backlight,
    DeviceError,
    discover,
    read_int,
    resolve_device,
    write_int,
)
from conftest import make_device


def test_read_int_strips_whitespace(tmp_path: Path) -> None:
    p = tmp_path / "value"
    p.write_text("  937\n", encoding="utf-8")
    assert read_int(p) == 937


def test_read_int_rejects_garbage(tmp_path: Path) -> None:
    p = tmp_path / "value"
    p.write_text("bright\n", encoding="utf-8")
    with pytest.raises(DeviceError, match="does not hold an integer"):
        read_int(p)


def test_read_int_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DeviceError, match="cannot read"):
        read_int(tmp_path / "nope")


def test_write_int_appends_newline(tmp_path: Path) -> None:
    p = tmp_path / "value"
    write_int(p, 42)
    assert p.read_text(encoding="utf-8") == "42\n"


def test_write_int_into_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(DeviceError, match="cannot write"):
        write_int(tmp_path / "missing" / "value", 1)


def test_backlight_reads_and_writes_sysfs(device: Path) -> None:
    bl = Backlight(device)
    bl.validate()
    assert bl.name == "intel_backlight"
    assert bl.actual() == 400
    assert bl.maximum() == 1000

    bl.set_brightness(123)
    assert (device / "brightness").read_text(encoding="utf-8") == "123\n"


def test_validate_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(DeviceError, match="existing device folder"):
        Backlight(tmp_path / "ghost").validate()


def test_validate_not_a_dir(tmp_path: Path) -> None:
    f = tmp_path / "file"
    f.write_text("", encoding="utf-8")
    with pytest.raises(DeviceError, match="should point to a device folder"):
        Backlight(f).validate()


@pytest.mark.parametrize("attr", ["actual_brightness", "max_brightness", "brightness"])
def test_validate_missing_attribute(device: Path, attr: str) -> None:
    (device / attr).unlink()
    with pytest.raises(DeviceError, match=attr):
        Backlight(device).validate()


def test_discover_picks_first_entry(sysfs_root: Path) -> None:
    make_device(sysfs_root, "intel_backlight")
    make_device(sysfs_root, "acpi_video0")
    assert discover(sysfs_root) == sysfs_root / "acpi_video0"


def test_discover_empty_root(sysfs_root: Path) -> None:
    with pytest.raises(DeviceError, match="no backlight devices"):
        discover(sysfs_root)


def test_discover_missing_root(tmp_path: Path) -> None:
    with pytest.raises(DeviceError):
        discover(tmp_path / "nothing")


def test_resolve_device(sysfs_root: Path, device: Path) -> None:
    assert resolve_device(None, sysfs_root) == device
    assert resolve_device("intel_backlight", sysfs_root) == device
    assert resolve_device(str(device), sysfs_root) == device


def test_read_int_rejects_invalid_utf8(tmp_path: Path) -> None:
    p = tmp_path / "value"
    p.write_bytes(b"\xff\xfe\n")
    with pytest.raises(DeviceError, match="does not hold an integer"):
        read_int(p)


def test_bare_name_ignores_cwd_entry(sysfs_root: Path, tmp_path: Path, monkeypatch) -> None:
    work = tmp_path / "work"
    (work / "intel_backlight").mkdir(parents=True)
    monkeypatch.chdir(work)
    assert resolve_device("intel_backlight", sysfs_root) == sysfs_root / "intel_backlight"
    assert resolve_device("./intel_backlight", sysfs_root) == Path("intel_backlight")
