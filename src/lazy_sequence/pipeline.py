"""Lazy and eager consumption pipelines and their comparator."""

import logging
import time
from typing import Dict, Optional, Union

from .config import SequenceConfig
from .errors import InvalidArgument
from .materializer import get_materializer
from .models import ConsumptionStatistics, SinkType
from .protocols import LoggerProtocol, Transform
from .sequence_generator import SequenceGenerator
from .utils import MemoryProfiler, format_bytes


class LazyPipeline:
    """
    Consumes a sequence one pull at a time.

    Only pulled values are ever computed or transformed; with a ``limit``
    the pipeline stops early and the rest of the range is never evaluated.
    """

    def __init__(
        self,
        config: SequenceConfig,
        transform: Optional[Transform] = None,
        limit: Optional[int] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize lazy pipeline.

        Args:
            config: Sequence parameters
            transform: Optional per-value transform
            limit: Maximum number of values to pull (all when None)
            logger: Logger instance
        """
        if limit is not None and limit < 0:
            raise InvalidArgument("limit must not be negative")
        self.config = config
        self.transform = transform
        self.limit = limit
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> ConsumptionStatistics:
        """
        Pull values until exhaustion or until ``limit`` values were pulled.

        Returns:
            ConsumptionStatistics with operation results
        """
        start_time = time.time()
        generator = SequenceGenerator.create(self.config.start, self.config.end, self.config.step)
        stats = ConsumptionStatistics()

        while self.limit is None or stats.values_pulled < self.limit:
            result = generator.next()
            if result.done:
                break
            value = result.value
            stats.last_value = self.transform(value) if self.transform else value
            stats.values_pulled += 1

        stats.exhausted = generator.exhausted
        stats.elapsed_time = time.time() - start_time

        if self._logger:
            state = "exhausted" if stats.exhausted else "stopped early"
            self._logger.info(
                f"Lazy pipeline pulled {stats.values_pulled:,} values ({state}) "
                f"in {stats.elapsed_time:.4f} seconds"
            )
        return stats


class EagerPipeline:
    """
    Materializes the whole sequence before consuming it.

    Memory grows with the length of the range - use LazyPipeline for large ranges.
    """

    def __init__(
        self,
        config: SequenceConfig,
        transform: Optional[Transform] = None,
        sink: Union[SinkType, str] = SinkType.LIST,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize eager pipeline.

        Args:
            config: Sequence parameters
            transform: Optional per-value transform
            sink: Collection type to materialize into
            logger: Logger instance
        """
        self.config = config
        self.transform = transform
        self.materializer = get_materializer(sink)
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> ConsumptionStatistics:
        """
        Materialize the full range, then walk the collection.

        Returns:
            ConsumptionStatistics with operation results
        """
        start_time = time.time()
        generator = SequenceGenerator.create(self.config.start, self.config.end, self.config.step)
        values = self.materializer.materialize(generator, self.transform)

        stats = ConsumptionStatistics(exhausted=generator.exhausted)
        for value in values:
            stats.last_value = value
            stats.values_pulled += 1
        stats.elapsed_time = time.time() - start_time

        if self._logger:
            self._logger.info(
                f"Eager pipeline materialized {stats.values_pulled:,} values "
                f"in {stats.elapsed_time:.4f} seconds"
            )
        return stats


class PipelineComparator:
    """
    Compares lazy vs eager consumption.

    Single Responsibility: Compare pipeline performance and memory usage.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize comparator.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self.profiler = MemoryProfiler(logger)

    def compare(
        self,
        config: SequenceConfig,
        transform: Optional[Transform] = None,
        sink: Union[SinkType, str] = SinkType.LIST,
    ) -> Dict[str, Dict]:
        """
        Profile both approaches over the same range.

        Args:
            config: Sequence parameters
            transform: Optional per-value transform
            sink: Collection type for the eager pipeline

        Returns:
            Dictionary with ``lazy`` and ``eager`` profiles
        """
        if self._logger:
            self._logger.info("=" * 80)
            self._logger.info("LAZY VS EAGER MEMORY COMPARISON")
            self._logger.info("=" * 80)

        lazy_pipeline = LazyPipeline(config, transform, logger=self._logger)
        lazy_stats = self.profiler.profile("Lazy Pipeline", lazy_pipeline.execute)

        eager_pipeline = EagerPipeline(config, transform, sink=sink, logger=self._logger)
        eager_stats = self.profiler.profile("Eager Pipeline", eager_pipeline.execute)

        self._print_comparison(lazy_stats, eager_stats)
        return {"lazy": lazy_stats, "eager": eager_stats}

    def _print_comparison(self, lazy_stats: Dict, eager_stats: Dict):
        """Print comparison results."""
        if self._logger:
            self._logger.info("=" * 80)
            self._logger.info("COMPARISON SUMMARY")
            self._logger.info("=" * 80)

            peak_diff = eager_stats["peak_memory"] - lazy_stats["peak_memory"]
            peak_diff_percent = (
                (peak_diff / lazy_stats["peak_memory"] * 100)
                if lazy_stats["peak_memory"] > 0
                else 0
            )

            self._logger.info(
                f"Peak Memory Usage:\n"
                f"  Lazy:       {format_bytes(lazy_stats['peak_memory'])}\n"
                f"  Eager:      {format_bytes(eager_stats['peak_memory'])}\n"
                f"  Difference: {format_bytes(peak_diff)} ({peak_diff_percent:+.1f}%)"
            )

            self._logger.info(
                f"Execution Time:\n"
                f"  Lazy:  {lazy_stats['elapsed_time']:.4f} seconds\n"
                f"  Eager: {eager_stats['elapsed_time']:.4f} seconds"
            )
