"""Memory monitoring and pressure detection."""

import time
import psutil
from typing import List, Optional
from dataclasses import dataclass

from lazyseq.config import MemoryPressureLevel, config


@dataclass
class MemoryInfo:
    """Memory usage information."""
    total: int
    available: int
    used: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    @property
    def used_gb(self) -> float:
        return self.used / (1024 ** 3)

    @property
    def available_gb(self) -> float:
        return self.available / (1024 ** 3)

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% used "
                f"({self.used_gb:.2f}/{self.available_gb:.2f} GB), "
                f"Pressure: {self.pressure_level.name}")


class MemoryMonitor:
    """Sample system memory and classify pressure."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None to follow config.memory_limit)
        """
        self.memory_limit = memory_limit
        self._history: List[MemoryInfo] = []
        self._max_history = 100

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        mem = psutil.virtual_memory()

        # Use configured limit if lower than system memory
        total = min(mem.total, self.memory_limit or config.memory_limit)
        used = mem.used
        available = max(0, total - used)
        percent = (used / total) * 100 if total else 100.0

        if percent >= 95:
            level = MemoryPressureLevel.CRITICAL
        elif percent >= 85:
            level = MemoryPressureLevel.HIGH
        elif percent >= 70:
            level = MemoryPressureLevel.MEDIUM
        elif percent >= 50:
            level = MemoryPressureLevel.LOW
        else:
            level = MemoryPressureLevel.NONE

        return MemoryInfo(
            total=total,
            available=available,
            used=used,
            percent=percent,
            pressure_level=level,
            timestamp=time.time()
        )

    def check_memory_pressure(self) -> MemoryInfo:
        """Sample memory, record it in the history and return it."""
        info = self.get_memory_info()

        self._history.append(info)
        if len(self._history) > self._max_history:
            self._history.pop(0)

        return info

    @property
    def history(self) -> List[MemoryInfo]:
        return list(self._history)


# Global monitor instance
memory_monitor = MemoryMonitor()
