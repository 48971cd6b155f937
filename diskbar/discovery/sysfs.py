"""Helpers for reading the kernel's /sys/block tree."""
import re
from pathlib import Path
from typing import List, Union

from diskbar.core.logger import get_logger

logger = get_logger(__name__)

SYS_BLOCK = Path("/sys/block")

_DIGITS = re.compile(r"(\d+)")


class DiscoveryError(Exception):
    """Raised when a block-device directory cannot be listed."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot list {self.path}: {reason}")


def natural_key(name: str) -> List[Union[int, str]]:
    """Sort key comparing digit runs as numbers."""
    return [int(part) if part.isdecimal() else part for part in _DIGITS.split(name)]


def list_entries(directory: Path) -> List[str]:
    """Return the entry names of *directory* in natural order (sda2 before sda10).

    Raises:
        DiscoveryError: If the directory cannot be read
    """
    try:
        return sorted((entry.name for entry in Path(directory).iterdir()), key=natural_key)
    except OSError as e:
        raise DiscoveryError(directory, e.strerror or str(e)) from e


def read_size(path: Path) -> int:
    """Read a sysfs ``size`` attribute (512-byte sectors).

    Missing, unreadable or malformed files count as 0.
    """
    try:
        text = Path(path).read_text().strip()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return 0
    try:
        return max(int(text), 0)
    except ValueError:
        logger.debug(f"Ignoring malformed size in {path}: {text!r}")
        return 0
