"""Memory sampling used while materialising streams."""

from lazyseq.config import MemoryPressureLevel
from lazyseq.memory.monitor import (
    MemoryMonitor,
    MemoryInfo,
    memory_monitor,
)

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "memory_monitor",
]
