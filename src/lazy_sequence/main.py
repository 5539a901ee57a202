"""Main entry point for the lazy sequence application."""

import logging
import sys
import time

from .config import get_app_config, get_sequence_config
from .materializer import materialize
from .pipeline import LazyPipeline, PipelineComparator
from .sequence_generator import SequenceGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(generator: SequenceGenerator, values, materialize_time: float, sink: str):
    """Print summary statistics.

    Args:
        generator: The drained generator
        values: Materialized collection
        materialize_time: Time taken to materialize
        sink: Sink the values were materialized into
    """
    descriptor = generator.descriptor

    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nSequence:")
    print(f"  Start: {descriptor.start}")
    print(f"  End (exclusive): {descriptor.end}")
    print(f"  Step: {descriptor.step}")
    print(f"  Expected length: {descriptor.length:,}")

    print("\nMaterialization:")
    print(f"  Sink: {sink}")
    print(f"  Number of values: {len(values):,}")
    print(f"  Time taken: {materialize_time:.4f} seconds")
    print(f"  Generator exhausted: {generator.exhausted}")

    print("\n" + "=" * 80)


def main() -> int:
    """Main execution function."""
    try:
        app_config = get_app_config()
        sequence_config = get_sequence_config()
        setup_logging(app_config.verbose)

        logger.info("Starting lazy sequence")
        logger.info("=" * 80)
        logger.info(
            f"Range: start={sequence_config.start}, end={sequence_config.end}, "
            f"step={sequence_config.step}"
        )
        logger.info(f"Sink: {app_config.sink.value}")

        generator = SequenceGenerator.create(
            sequence_config.start, sequence_config.end, sequence_config.step
        )

        start_time = time.time()
        values = materialize(generator, sink=app_config.sink)
        materialize_time = time.time() - start_time

        logger.info(f"Materialized {len(values):,} values in {materialize_time:.4f} seconds")

        if app_config.take is not None:
            logger.info("\n" + "-" * 80)
            logger.info(f"Lazy pull of the first {app_config.take:,} values")
            logger.info("-" * 80)
            LazyPipeline(sequence_config, limit=app_config.take).execute()

        if app_config.compare_pipelines:
            PipelineComparator().compare(sequence_config, sink=app_config.sink)

        print_summary(generator, values, materialize_time, app_config.sink.value)

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
