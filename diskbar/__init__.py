"""diskbar - terminal chart of drive capacity and partition usage."""

__version__ = "0.1.0"
