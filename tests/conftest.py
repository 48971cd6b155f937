"""Shared test fixtures for diskbar tests."""
from pathlib import Path
from types import SimpleNamespace
from typing import Dict, Optional

import pytest

from diskbar.core import config as config_module


def make_drive(
    root: Path,
    name: str,
    size: Optional[str] = "0",
    partitions: Optional[Dict[str, Optional[str]]] = None,
) -> Path:
    """Create a fake /sys/block/<name> directory.

    A size of None leaves the ``size`` attribute out.
    """
    drive = root / name
    (drive / "queue").mkdir(parents=True)
    (drive / "removable").write_text("0\n")
    if size is not None:
        (drive / "size").write_text(f"{size}\n")
    for part_name, part_size in (partitions or {}).items():
        part = drive / part_name
        part.mkdir()
        (part / "partition").write_text("1\n")
        if part_size is not None:
            (part / "size").write_text(f"{part_size}\n")
    return drive


def fake_disk_usage(results: Dict[str, tuple]):
    """Build a psutil.disk_usage replacement from ``{path: (total, used)}``."""
    def _disk_usage(path):
        if path not in results:
            raise FileNotFoundError(2, "No such file or directory", path)
        total, used = results[path]
        free = total - used
        percent = round(used / total * 100, 1) if total else 0.0
        return SimpleNamespace(total=total, used=used, free=free, percent=percent)
    return _disk_usage


@pytest.fixture
def sys_block(tmp_path):
    """Empty fake /sys/block directory."""
    root = tmp_path / "sys" / "block"
    root.mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Keep DISKBAR_* settings from leaking between tests."""
    for var in (
        "DISKBAR_SYS_BLOCK",
        "DISKBAR_MOUNTS_FILE",
        "DISKBAR_USAGE_BAR_WIDTH",
        "DISKBAR_MAX_CHART_WIDTH",
        "DISKBAR_MOCK",
    ):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def drive_factory(sys_block):
    """Create drives under the fake /sys/block: ``drive_factory("sda", "100", {"sda1": "50"})``."""
    def _factory(name, size="0", partitions=None):
        return make_drive(sys_block, name, size, partitions)
    return _factory


@pytest.fixture
def disk_usage_factory():
    return fake_disk_usage
