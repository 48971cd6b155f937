"""Filesystem usage lookup for mounted partitions."""
from typing import Any, Callable, Optional

import psutil

from diskbar.core.logger import get_logger

logger = get_logger(__name__)

DiskUsageFn = Callable[[str], Any]


def probe_usage(mount_path: str, disk_usage: DiskUsageFn = psutil.disk_usage) -> Optional[int]:
    """Return the bytes used on the filesystem mounted at *mount_path*.

    Any failure of the statistics call returns None so the partition shows
    as unmounted.
    """
    try:
        usage = disk_usage(mount_path)
    except (OSError, ValueError) as e:
        logger.debug(f"disk_usage({mount_path!r}) failed: {e}")
        return None

    return max(int(usage.used), 0)
