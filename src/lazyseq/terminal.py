"""
Terminal operations that force evaluation of a stream.
"""

import logging
from typing import List, TypeVar

from lazyseq.config import config
from lazyseq.enumerator import EXHAUSTED
from lazyseq.memory import memory_monitor
from lazyseq.stream import Stream

T = TypeVar('T')

logger = logging.getLogger(__name__)


def to_array(stream: Stream[T]) -> List[T]:
    """
    Drain a stream into a list, in order.

    A fresh enumerator is produced on every call, so a reusable stream can
    be materialised any number of times. An infinite stream never finishes
    draining; bound it before calling this.

    Every ``config.memory_check_interval`` elements the system memory is
    sampled and a warning is logged once pressure reaches
    ``config.memory_warning_level``. Draining itself is never interrupted.
    """
    result: List[T] = []
    enumerator = stream.enumerate()
    warned = False

    while True:
        value = enumerator.move_next()
        if value is EXHAUSTED:
            break
        result.append(value)

        if not warned and len(result) % config.memory_check_interval == 0:
            info = memory_monitor.check_memory_pressure()
            if info.pressure_level >= config.memory_warning_level:
                logger.warning(
                    f"to_array() holding {len(result):,} elements of {stream!r}; {info}"
                )
                warned = True

    return result
