"""Data models for diskbar."""
from diskbar.models.drive import SECTOR_SIZE, Drive, Partition

__all__ = [
    'SECTOR_SIZE',
    'Drive',
    'Partition',
]
