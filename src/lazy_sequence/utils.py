"""Utility classes for profiling and observing transforms."""

import gc
import logging
import os
import time
import tracemalloc
from typing import Any, Callable, Dict, List, Optional

import psutil

from .models import Number
from .protocols import LoggerProtocol, Transform


class CallCounter:
    """
    Wraps a transform and counts how many values it was applied to.

    Single Responsibility: Make on-demand evaluation observable.
    """

    def __init__(self, transform: Optional[Transform] = None, record: bool = False):
        """
        Initialize call counter.

        Args:
            transform: Transform to wrap (identity if omitted)
            record: Keep every input value in ``seen``; memory grows with
                the number of calls
        """
        self._transform = transform
        self.calls = 0
        self.seen: Optional[List[Number]] = [] if record else None

    def __call__(self, value: Number) -> Any:
        self.calls += 1
        if self.seen is not None:
            self.seen.append(value)
        if self._transform is None:
            return value
        return self._transform(value)


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Single Responsibility: Track and report memory statistics.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize memory profiler.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], Any]) -> Dict[str, Any]:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Function to execute

        Returns:
            Dictionary with memory statistics and the operation's result
        """
        gc.collect()

        tracemalloc.start()
        start_time = time.time()
        try:
            result = operation_func()
            elapsed_time = time.time() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        mem_info = process.memory_info()

        stats = {
            "operation": operation_name,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": mem_info.rss,
            "vms": mem_info.vms,
            "memory_percent": process.memory_percent(),
            "result": result,
        }

        if self._logger:
            self._logger.debug(
                f"{operation_name}: peak {format_bytes(peak_mem)} in {elapsed_time:.4f} seconds"
            )

        return stats


def format_bytes(bytes_value: float) -> str:
    """Format bytes to human-readable format."""
    for unit in ["B", "KB", "MB", "GB"]:
        if abs(bytes_value) < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} TB"
