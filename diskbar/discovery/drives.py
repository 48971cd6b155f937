"""Top-level block device discovery."""
from pathlib import Path
from typing import List, Optional

from diskbar.core.logger import get_logger
from diskbar.discovery.mounts import MountTable
from diskbar.discovery.partitions import UsageProbe, discover_partitions
from diskbar.discovery.sysfs import SYS_BLOCK, DiscoveryError, list_entries, read_size
from diskbar.discovery.usage import probe_usage
from diskbar.models.drive import GIB, Drive, Partition

logger = get_logger(__name__)

# Device-mapper nodes are views of devices already listed
EXCLUDED_PREFIXES = ("dm",)

# Mount snapshot matching the mock drives
MOCK_MOUNTS = {
    "/dev/nvme0n1p1": "/boot/efi",
    "/dev/nvme0n1p2": "/",
    "/dev/nvme0n1p3": "/home",
}


class DriveDiscovery:
    """Discover drives and their partitions from /sys/block."""

    def __init__(
        self,
        sys_block: Path = SYS_BLOCK,
        mounts: Optional[MountTable] = None,
        probe: UsageProbe = probe_usage,
        mock: bool = False,
    ):
        self.sys_block = Path(sys_block)
        self.mounts = mounts if mounts is not None else MountTable()
        self.probe = probe
        self.mock = mock
        self.failures: List[DiscoveryError] = []

    def discover_all(self) -> List[Drive]:
        """Discover every drive in the system.

        A drive whose partition directory cannot be listed is skipped and
        recorded in ``failures``.

        Raises:
            DiscoveryError: If the block-device directory cannot be listed
        """
        if self.mock:
            return self._mock_drives()

        self.failures = []
        drives = []

        for name in list_entries(self.sys_block):
            if name.startswith(EXCLUDED_PREFIXES):
                logger.debug(f"Skipping device-mapper device {name}")
                continue

            try:
                drives.append(self.discover_drive(name))
            except DiscoveryError as e:
                logger.debug(f"Skipping drive {name}: {e}")
                self.failures.append(e)

        return drives

    def discover_drive(self, name: str) -> Drive:
        """Build a single Drive from its sysfs directory."""
        return Drive(
            name=name,
            size=read_size(self.sys_block / name / "size"),
            partitions=discover_partitions(
                name, self.mounts, sys_block=self.sys_block, probe=self.probe
            ),
        )

    def _mock_drives(self) -> List[Drive]:
        """Mock drive data for demos and testing."""
        return [
            Drive(
                name="nvme0n1",
                size=1_000_215_216,  # ~477 GB
                partitions=[
                    Partition(name="nvme0n1p1", size=1_048_576, used=32 * 1024 ** 2),
                    Partition(name="nvme0n1p2", size=209_715_200, used=38 * GIB),
                    Partition(name="nvme0n1p3", size=789_449_728, used=211 * GIB),
                ],
            ),
            Drive(
                name="sda",
                size=3_907_029_168,  # ~1.8 TB
                partitions=[
                    Partition(name="sda1", size=3_907_027_087, used=None),
                ],
            ),
        ]


def discover_drives(
    sys_block: Path = SYS_BLOCK,
    mounts: Optional[MountTable] = None,
    probe: UsageProbe = probe_usage,
) -> List[Drive]:
    """Discover drives, raising on the first unlistable directory."""
    discovery = DriveDiscovery(sys_block=sys_block, mounts=mounts, probe=probe)
    drives = discovery.discover_all()
    if discovery.failures:
        raise discovery.failures[0]
    return drives
