"""Test drive and partition discovery against a fake /sys/block."""
from functools import partial

import pytest

from diskbar.discovery import (
    DiscoveryError,
    DriveDiscovery,
    MountTable,
    discover_drives,
    discover_partitions,
)
from diskbar.discovery.sysfs import list_entries, natural_key, read_size
from diskbar.discovery.usage import probe_usage

GIB = 1024 ** 3


class TestSysfsHelpers:
    """Test low-level sysfs reads."""

    def test_read_size(self, tmp_path):
        (tmp_path / "size").write_text("2097152\n")
        assert read_size(tmp_path / "size") == 2097152

    def test_read_size_missing_is_zero(self, tmp_path):
        assert read_size(tmp_path / "size") == 0

    def test_read_size_malformed_is_zero(self, tmp_path):
        (tmp_path / "size").write_text("lots\n")
        assert read_size(tmp_path / "size") == 0

    def test_list_entries_sorted(self, tmp_path):
        for name in ("sdb", "sda", "nvme0n1"):
            (tmp_path / name).mkdir()
        assert list_entries(tmp_path) == ["nvme0n1", "sda", "sdb"]

    def test_list_entries_natural_order(self, tmp_path):
        for number in range(1, 12):
            (tmp_path / f"sda{number}").mkdir()

        assert list_entries(tmp_path) == [f"sda{number}" for number in range(1, 12)]

    def test_natural_key_orders_digit_runs_numerically(self):
        names = ["nvme0n1p10", "nvme0n1p2", "nvme1n1", "nvme0n1"]
        assert sorted(names, key=natural_key) == ["nvme0n1", "nvme0n1p2", "nvme0n1p10", "nvme1n1"]

    def test_list_entries_missing_raises(self, tmp_path):
        with pytest.raises(DiscoveryError) as excinfo:
            list_entries(tmp_path / "missing")

        assert excinfo.value.path == tmp_path / "missing"
        assert "cannot list" in str(excinfo.value)


class TestPartitionDiscovery:
    """Test partition enumeration for one drive."""

    def test_only_entries_named_after_drive(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "400", "sda2": "600"})

        partitions = discover_partitions("sda", MountTable(), sys_block=sys_block)

        assert [p.name for p in partitions] == ["sda1", "sda2"]
        assert [p.size for p in partitions] == [400, 600]

    def test_mounted_partition_gets_usage(self, sys_block, drive_factory, disk_usage_factory):
        drive_factory("sda", "1000", {"sda1": "400", "sda2": "600"})
        mounts = MountTable({"/dev/sda2": "/home"})
        disk_usage = disk_usage_factory({"/home": (100 * 4096, 60 * 4096)})

        partitions = discover_partitions(
            "sda", mounts, sys_block=sys_block,
            probe=partial(probe_usage, disk_usage=disk_usage),
        )

        assert partitions[0].used is None
        assert partitions[1].used == 60 * 4096

    def test_unmounted_partition_is_not_probed(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "1000"})
        probed = []

        partitions = discover_partitions(
            "sda", MountTable(), sys_block=sys_block, probe=lambda path: probed.append(path)
        )

        assert probed == []
        assert partitions[0].used is None
        assert partitions[0].is_mounted is False

    def test_failed_probe_leaves_usage_unknown(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "1000"})
        mounts = MountTable({"/dev/sda1": "/gone"})

        partitions = discover_partitions("sda", mounts, sys_block=sys_block, probe=lambda path: None)

        assert partitions[0].used is None

    def test_missing_partition_size_is_zero(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": None})

        partitions = discover_partitions("sda", MountTable(), sys_block=sys_block)

        assert partitions[0].size == 0

    def test_many_partitions_keep_kernel_numbering(self, sys_block, drive_factory):
        drive_factory("sda", "1100", {f"sda{n}": "100" for n in range(1, 12)})

        partitions = discover_partitions("sda", MountTable(), sys_block=sys_block)

        assert [p.name for p in partitions] == [f"sda{n}" for n in range(1, 12)]

    def test_unlistable_drive_raises(self, sys_block):
        with pytest.raises(DiscoveryError):
            discover_partitions("sdz", MountTable(), sys_block=sys_block)


class TestDriveDiscovery:
    """Test top-level drive enumeration."""

    def test_excludes_device_mapper(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "1000"})
        drive_factory("dm-0", "800")

        drives = DriveDiscovery(sys_block=sys_block).discover_all()

        assert [d.name for d in drives] == ["sda"]

    def test_builds_drive_with_partitions(self, sys_block, drive_factory):
        drive_factory("nvme0n1", "2097152", {"nvme0n1p1": "1048576", "nvme0n1p2": "1048576"})

        drives = DriveDiscovery(sys_block=sys_block).discover_all()

        assert len(drives) == 1
        drive = drives[0]
        assert drive.size == 2097152
        assert drive.size_gb == 1.0
        assert [p.name for p in drive.partitions] == ["nvme0n1p1", "nvme0n1p2"]

    def test_drive_without_partitions(self, sys_block, drive_factory):
        drive_factory("sr0", "0")

        drives = DriveDiscovery(sys_block=sys_block).discover_all()

        assert drives[0].name == "sr0"
        assert drives[0].partitions == []

    def test_unreadable_drive_size_is_zero(self, sys_block, drive_factory):
        drive_factory("sda", None, {"sda1": "100"})

        drives = DriveDiscovery(sys_block=sys_block).discover_all()

        assert drives[0].size == 0

    def test_missing_root_raises(self, tmp_path):
        discovery = DriveDiscovery(sys_block=tmp_path / "no-such-dir")

        with pytest.raises(DiscoveryError):
            discovery.discover_all()

    def test_unlistable_drive_is_skipped_and_recorded(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "1000"})
        (sys_block / "sdb").write_text("not a directory")

        discovery = DriveDiscovery(sys_block=sys_block)
        drives = discovery.discover_all()

        assert [d.name for d in drives] == ["sda"]
        assert len(discovery.failures) == 1
        assert discovery.failures[0].path == sys_block / "sdb"

    def test_discover_drives_raises_on_drive_failure(self, sys_block):
        (sys_block / "sdb").write_text("not a directory")

        with pytest.raises(DiscoveryError):
            discover_drives(sys_block=sys_block)

    def test_uses_shared_mount_snapshot(self, sys_block, drive_factory):
        drive_factory("sda", "1000", {"sda1": "1000"})
        mounts = MountTable({"/dev/sda1": "/"})
        seen = []

        def probe(path):
            seen.append(path)
            return 5 * GIB

        drives = DriveDiscovery(sys_block=sys_block, mounts=mounts, probe=probe).discover_all()

        assert seen == ["/"]
        assert drives[0].partitions[0].used == 5 * GIB

    def test_mock_drives(self):
        drives = DriveDiscovery(mock=True).discover_all()

        assert [d.name for d in drives] == ["nvme0n1", "sda"]
        assert drives[0].partitions[1].is_mounted is True
        assert drives[1].partitions[0].is_mounted is False
