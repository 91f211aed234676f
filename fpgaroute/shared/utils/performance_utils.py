"""Timing and memory helpers."""
import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator

import psutil

logger = logging.getLogger(__name__)


def memory_usage_mb() -> float:
    """Resident set size of the current process in MB."""
    return psutil.Process().memory_info().rss / (1024 * 1024)


@contextmanager
def timing_context(label: str, level: int = logging.DEBUG) -> Iterator[Dict[str, float]]:
    """Measure wall time of a block.

    The yielded dict receives ``elapsed`` (seconds) and ``memory_mb`` when the
    block exits, including when it exits with an exception.
    """
    timing: Dict[str, float] = {}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing['elapsed'] = time.perf_counter() - start
        timing['memory_mb'] = memory_usage_mb()
        logger.log(level, f"{label} took {timing['elapsed']:.3f}s "
                          f"(rss {timing['memory_mb']:.1f} MB)")
