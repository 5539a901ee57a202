"""Abstract interface for sequence materializers."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .protocols import Transform
from .sequence_generator import SequenceGenerator


class Materializer(ABC):
    """Abstract base class for draining a generator into a collection."""

    @abstractmethod
    def materialize(self, generator: SequenceGenerator, transform: Optional[Transform] = None) -> Any:
        """Drain ``generator`` into an ordered, indexable collection.

        Pulls until the generator is exhausted, applying ``transform`` to each
        value (identity if omitted) and keeping pull order. An exhausted
        generator yields an empty collection.

        Args:
            generator: Generator to drain
            transform: Optional per-value transform

        Returns:
            Ordered collection of transformed values

        Raises:
            TransformFailure: If ``transform`` raises for any value; no
                partial collection is returned
            InvalidArgument: If the transformed values cannot be converted
                into the sink collection
        """
        pass
