"""Mount table parsing.

The mount table is read once per run into a :class:`MountTable` snapshot
that both discovery and rendering consult, so every line of output reflects
the same instant of mount state.
"""
import re
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from diskbar.core.logger import get_logger

logger = get_logger(__name__)

PROC_MOUNTS = Path("/proc/mounts")

# The kernel escapes space, tab, newline and backslash as \ooo
_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def parse_mounts(text: str) -> Dict[str, str]:
    """Parse mount table text into a device path -> mount path mapping.

    Only the first two whitespace-separated fields of each line are used.
    When a device appears more than once the last entry wins.
    """
    mounts: Dict[str, str] = {}
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        mounts[_unescape(parts[0])] = _unescape(parts[1])
    return mounts


def resolve_mountpoints(path: Path = PROC_MOUNTS) -> Dict[str, str]:
    """Read the mount table at *path*; an unreadable table yields ``{}``."""
    try:
        # Mount paths are raw bytes; keep undecodable ones intact for disk_usage
        text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read mount table {path}: {e}")
        return {}
    return parse_mounts(text)


class MountTable(Mapping[str, str]):
    """Immutable snapshot of the mount table."""

    def __init__(self, mounts: Optional[Mapping[str, str]] = None):
        self._mounts = dict(mounts or {})

    @classmethod
    def load(cls, path: Path = PROC_MOUNTS) -> "MountTable":
        table = cls(resolve_mountpoints(path))
        logger.debug(f"Loaded {len(table)} mount entries from {path}")
        return table

    def __getitem__(self, device: str) -> str:
        return self._mounts[device]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mounts)

    def __len__(self) -> int:
        return len(self._mounts)

    def resolve(self) -> Dict[str, str]:
        """Return a copy of the device -> mount path mapping."""
        return dict(self._mounts)

    def lookup(self, device: str) -> Optional[str]:
        return self._mounts.get(device)

    def mountpoint_for(self, name: str) -> Optional[str]:
        """Mount path of kernel device *name* (``sda1`` -> ``/dev/sda1``)."""
        return self.lookup(f"/dev/{name.split('/')[-1]}")
