"""LRU page replacement simulation over BYU binary memory traces."""

__version__ = "0.1.0"
__all__ = ["pagequeue", "simulator", "trace"]