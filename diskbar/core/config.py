"""diskbar runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ConfigError(ValueError):
    """Raised when a DISKBAR_* environment variable holds an invalid value."""
    pass


def _int_env(name: str, default: int) -> int:
    """Read a non-negative integer from the environment."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        number = int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None
    if number < 0:
        raise ConfigError(f"{name} must not be negative, got {value!r}")
    return number


@dataclass
class DiskbarConfig:
    """Runtime configuration for a diskbar run.

    Attributes:
        sys_block: Kernel block-device directory (default: /sys/block)
        mounts_file: Live mount table (default: /proc/mounts)
        usage_bar_width: Cells in each per-partition usage bar (default: 20)
        max_chart_width: Upper bound for the aggregate bar width (default: 100)
    """

    sys_block: Path = Path("/sys/block")
    mounts_file: Path = Path("/proc/mounts")

    usage_bar_width: int = 20
    max_chart_width: int = 100

    @classmethod
    def from_env(cls) -> "DiskbarConfig":
        """Create config from environment variables.

        Environment variables:
            DISKBAR_SYS_BLOCK: Alternative block-device directory
            DISKBAR_MOUNTS_FILE: Alternative mount table
            DISKBAR_USAGE_BAR_WIDTH: Usage bar width in cells
            DISKBAR_MAX_CHART_WIDTH: Aggregate bar width cap in cells

        Returns:
            DiskbarConfig instance with values from environment or defaults

        Raises:
            ConfigError: If a width variable is not a non-negative integer
        """
        return cls(
            sys_block=Path(os.getenv("DISKBAR_SYS_BLOCK", str(cls.sys_block))),
            mounts_file=Path(os.getenv("DISKBAR_MOUNTS_FILE", str(cls.mounts_file))),
            usage_bar_width=_int_env("DISKBAR_USAGE_BAR_WIDTH", cls.usage_bar_width),
            max_chart_width=_int_env("DISKBAR_MAX_CHART_WIDTH", cls.max_chart_width),
        )


# Global config instance (can be overridden)
_config: Optional[DiskbarConfig] = None


def get_config() -> DiskbarConfig:
    """Get the global diskbar configuration.

    Returns:
        DiskbarConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = DiskbarConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
