"""Concrete materializers draining generators into lists, Arrow arrays and Series."""

import logging
from typing import Any, List, Optional, Union

import pandas as pd
import pyarrow as pa

from .errors import InvalidArgument, TransformFailure
from .materializer_interface import Materializer
from .models import SinkType
from .protocols import PullSource, Transform
from .sequence_generator import SequenceGenerator

logger = logging.getLogger(__name__)


def drain(source: PullSource, transform: Optional[Transform] = None) -> List[Any]:
    """Pull ``source`` until exhaustion into a list, applying ``transform``.

    Raises:
        TransformFailure: If ``transform`` raises; the values collected so far
            are discarded
    """
    values: List[Any] = []
    index = 0
    while True:
        result = source.next()
        if result.done:
            break
        if transform is None:
            values.append(result.value)
        else:
            try:
                values.append(transform(result.value))
            except Exception as e:
                logger.error(f"Transform failed at index {index} for value {result.value!r}: {e}")
                raise TransformFailure(index, result.value, e) from e
        index += 1
    return values


class ListMaterializer(Materializer):
    """Materialize into a plain Python list."""

    def materialize(self, generator: SequenceGenerator, transform: Optional[Transform] = None) -> List[Any]:
        values = drain(generator, transform)
        logger.debug(f"Materialized {len(values):,} values into list")
        return values


class ArrowMaterializer(Materializer):
    """Materialize into a ``pyarrow.Array``.

    Without an explicit type, Arrow infers it from the values. Empty
    untransformed results get ``int64`` or ``float64`` from the descriptor.
    """

    def __init__(self, type: Optional[pa.DataType] = None):
        """
        Initialize Arrow materializer.

        Args:
            type: Explicit Arrow type for the resulting array
        """
        self.type = type

    def materialize(self, generator: SequenceGenerator, transform: Optional[Transform] = None) -> pa.Array:
        values = drain(generator, transform)

        arrow_type = self.type
        if arrow_type is None and not values and transform is None:
            arrow_type = pa.int64() if generator.descriptor.is_integral else pa.float64()

        try:
            array = pa.array(values, type=arrow_type)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Cannot build Arrow array from materialized values: {e}") from e
        logger.debug(f"Materialized {len(array):,} values into Arrow array of type {array.type}")
        return array


class SeriesMaterializer(Materializer):
    """Materialize into a ``pandas.Series`` with a default RangeIndex."""

    def __init__(self, dtype: Optional[str] = None, name: Optional[str] = None):
        """
        Initialize Series materializer.

        Args:
            dtype: Explicit pandas dtype for the resulting Series
            name: Series name
        """
        self.dtype = dtype
        self.name = name

    def materialize(self, generator: SequenceGenerator, transform: Optional[Transform] = None) -> pd.Series:
        values = drain(generator, transform)

        dtype = self.dtype
        if dtype is None and not values:
            if transform is None:
                dtype = "int64" if generator.descriptor.is_integral else "float64"
            else:
                dtype = "object"

        try:
            series = pd.Series(values, dtype=dtype, name=self.name)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Cannot build Series of dtype {dtype} from materialized values: {e}") from e
        logger.debug(f"Materialized {len(series):,} values into Series of dtype {series.dtype}")
        return series


def get_materializer(sink: Union[SinkType, str] = SinkType.LIST) -> Materializer:
    """Create a materializer for ``sink``.

    Raises:
        InvalidArgument: If ``sink`` is not a known sink type
    """
    try:
        sink_type = SinkType(sink)
    except ValueError:
        raise InvalidArgument(
            f"Unknown sink: {sink}. Valid options: {', '.join(s.value for s in SinkType)}"
        ) from None

    if sink_type is SinkType.ARROW:
        return ArrowMaterializer()
    if sink_type is SinkType.SERIES:
        return SeriesMaterializer()
    return ListMaterializer()


def materialize(
    generator: SequenceGenerator,
    transform: Optional[Transform] = None,
    sink: Union[SinkType, str] = SinkType.LIST,
) -> Any:
    """Drain ``generator`` into the collection type selected by ``sink``.

    Draining consumes the generator: a second call on the same generator
    returns an empty collection.

    Args:
        generator: Generator to drain
        transform: Optional per-value transform, identity if omitted
        sink: Collection type, a list by default

    Returns:
        Ordered collection of transformed values

    Raises:
        TransformFailure: If ``transform`` raises for any value
        InvalidArgument: If ``sink`` is not a known sink type, or the values
            cannot be converted into it
    """
    return get_materializer(sink).materialize(generator, transform)
