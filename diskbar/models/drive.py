"""Block device models."""
from dataclasses import dataclass, field
from typing import List, Optional

# The kernel reports sizes in 512-byte sectors regardless of the
# device's logical block size.
SECTOR_SIZE = 512
GIB = 1024 ** 3


@dataclass(frozen=True)
class Partition:
    """A partition of a drive as seen at discovery time."""
    name: str                    # sda1
    size: int = 0                # Raw sector count, 0 if unreadable
    used: Optional[int] = None   # Bytes used, None when unmounted/unknown

    @property
    def device(self) -> str:
        return f"/dev/{self.name}"

    @property
    def size_bytes(self) -> int:
        return self.size * SECTOR_SIZE

    @property
    def size_gb(self) -> float:
        return self.size_bytes / GIB

    @property
    def used_gb(self) -> float:
        """Used space in GB, 0.0 when usage is unknown."""
        if self.used is None:
            return 0.0
        return self.used / GIB

    @property
    def is_mounted(self) -> bool:
        return self.used is not None


@dataclass(frozen=True)
class Drive:
    """A top-level block device and its partitions in discovery order."""
    name: str                    # sda
    size: int = 0                # Raw sector count, 0 if unreadable
    partitions: List[Partition] = field(default_factory=list)

    @property
    def device(self) -> str:
        return f"/dev/{self.name}"

    @property
    def size_gb(self) -> float:
        return self.size * SECTOR_SIZE / GIB
