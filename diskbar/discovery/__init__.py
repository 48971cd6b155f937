"""Block device, mount table and filesystem usage discovery."""
from diskbar.discovery.drives import DriveDiscovery, discover_drives
from diskbar.discovery.mounts import MountTable, parse_mounts, resolve_mountpoints
from diskbar.discovery.partitions import discover_partitions
from diskbar.discovery.sysfs import DiscoveryError
from diskbar.discovery.usage import probe_usage

__all__ = [
    'DiscoveryError',
    'DriveDiscovery',
    'MountTable',
    'discover_drives',
    'discover_partitions',
    'parse_mounts',
    'probe_usage',
    'resolve_mountpoints',
]
