"""Partition discovery for a single drive."""
from pathlib import Path
from typing import Callable, List, Optional

from diskbar.core.logger import get_logger
from diskbar.discovery.mounts import MountTable
from diskbar.discovery.sysfs import SYS_BLOCK, list_entries, read_size
from diskbar.discovery.usage import probe_usage
from diskbar.models.drive import Partition

logger = get_logger(__name__)

UsageProbe = Callable[[str], Optional[int]]


def discover_partitions(
    drive_name: str,
    mounts: MountTable,
    sys_block: Path = SYS_BLOCK,
    probe: UsageProbe = probe_usage,
) -> List[Partition]:
    """Enumerate the partitions of *drive_name*.

    Partitions are the entries of ``<sys_block>/<drive>/`` named after the
    drive (``sda1``, ``sda2`` for ``sda``). Usage is only probed for
    partitions present in the mount snapshot.

    Raises:
        DiscoveryError: If the drive directory cannot be listed
    """
    drive_dir = Path(sys_block) / drive_name
    partitions = []

    for name in list_entries(drive_dir):
        if not name.startswith(drive_name):
            continue

        size = read_size(drive_dir / name / "size")

        used = None
        mount_path = mounts.mountpoint_for(name)
        if mount_path is not None:
            used = probe(mount_path)

        logger.debug(f"Partition {name}: size={size} mount={mount_path} used={used}")
        partitions.append(Partition(name=name, size=size, used=used))

    return partitions
