"""
Configuration management for lazy stream operations.
"""

from typing import Any, Optional, Union
from dataclasses import dataclass, field, fields
from enum import Enum
import psutil


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def coerce(cls, value: Union['MemoryPressureLevel', str, int]) -> 'MemoryPressureLevel':
        """Accept a member, its name ('high') or its numeric value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"Unknown memory pressure level: {value!r}") from None
        return cls(value)


@dataclass
class StreamConfig:
    """Global configuration for stream operations."""

    # Sources
    snapshot_arrays: bool = True  # FromArray copies its items into a tuple

    # Diagnostics
    trace_enumeration: bool = False  # Debug-log every element a source yields

    # Materialisation
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))
    memory_check_interval: int = 10_000  # Elements drained between memory samples
    memory_warning_level: MemoryPressureLevel = MemoryPressureLevel.HIGH

    _instance: Optional['StreamConfig'] = None

    def __post_init__(self):
        """Normalise values that may be given by name."""
        self.memory_warning_level = MemoryPressureLevel.coerce(self.memory_warning_level)
        if self.memory_check_interval < 1:
            raise ValueError("memory_check_interval must be at least 1")

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs: Any) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if key == 'memory_warning_level':
                value = MemoryPressureLevel.coerce(value)
            elif key == 'memory_check_interval' and value < 1:
                raise ValueError("memory_check_interval must be at least 1")
            if hasattr(instance, key):
                setattr(instance, key, value)

    @classmethod
    def reset_defaults(cls) -> None:
        """Restore every field of the shared instance to its default."""
        instance = cls.get_instance()
        pristine = cls()
        for f in fields(cls):
            if f.name.startswith('_'):
                continue
            setattr(instance, f.name, getattr(pristine, f.name))


# Global configuration instance
config = StreamConfig.get_instance()
