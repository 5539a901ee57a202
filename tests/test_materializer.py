"""Tests for materializer module."""

import pandas as pd
import pyarrow as pa
import pytest

from lazy_sequence import (
    ArrowMaterializer,
    InvalidArgument,
    ListMaterializer,
    SequenceError,
    SeriesMaterializer,
    SinkType,
    TransformFailure,
    create,
    get_materializer,
    materialize,
)
from lazy_sequence.materializer import drain
from lazy_sequence.utils import CallCounter


def test_materialize_with_transform():
    """Test that the transform is applied in pull order."""
    values = materialize(create(0, 4, 1), lambda v: f"item-{v}")

    assert values == ["item-0", "item-1", "item-2", "item-3"]


def test_materialize_twice_returns_empty_second_time():
    """Test that materializing a drained generator yields an empty list."""
    generator = create(0, 5, 1)

    assert materialize(generator) == [0, 1, 2, 3, 4]
    assert materialize(generator) == []


def test_transform_failure_propagates():
    """Test that a failing transform raises TransformFailure with context."""

    def explode_on_three(v):
        if v == 3:
            raise ZeroDivisionError("boom")
        return v

    with pytest.raises(TransformFailure, match="index 3") as exc_info:
        materialize(create(0, 10, 1), explode_on_three)

    error = exc_info.value
    assert error.index == 3
    assert error.value == 3
    assert isinstance(error.__cause__, ZeroDivisionError)
    assert isinstance(error.original, ZeroDivisionError)


def test_transform_failure_stops_pulling():
    """Test that materialization stops at the failing element."""
    generator = create(0, 10, 1)

    def fail_on_two(v):
        if v == 2:
            raise ValueError("bad value")
        return v

    with pytest.raises(TransformFailure):
        ListMaterializer().materialize(generator, fail_on_two)

    assert generator.current == 3
    assert not generator.exhausted


def test_drain_applies_transform_once_per_value():
    """Test that drain calls the transform exactly once per value."""
    counter = CallCounter()

    assert drain(create(0, 6, 2), counter) == [0, 2, 4]
    assert counter.calls == 3
    assert counter.seen is None


def test_arrow_materializer():
    """Test materializing into a pyarrow Array."""
    array = ArrowMaterializer().materialize(create(0, 5, 1))

    assert isinstance(array, pa.Array)
    assert array.type == pa.int64()
    assert array.to_pylist() == [0, 1, 2, 3, 4]
    assert array[2].as_py() == 2


def test_arrow_materializer_empty_types():
    """Test the type of empty Arrow results."""
    assert ArrowMaterializer().materialize(create(5, 5, 1)).type == pa.int64()
    assert ArrowMaterializer().materialize(create(5.0, 5.0, 0.5)).type == pa.float64()


def test_arrow_materializer_explicit_type():
    """Test an explicit Arrow type."""
    array = ArrowMaterializer(type=pa.float32()).materialize(create(0, 3, 1))

    assert array.type == pa.float32()
    assert len(array) == 3


def test_arrow_materializer_with_transform():
    """Test that transformed values keep their inferred Arrow type."""
    array = ArrowMaterializer().materialize(create(0, 3, 1), str)

    assert array.type == pa.string()
    assert array.to_pylist() == ["0", "1", "2"]


def test_series_materializer():
    """Test materializing into a pandas Series."""
    series = SeriesMaterializer(name="values").materialize(create(10, 0, -2))

    assert isinstance(series, pd.Series)
    assert series.name == "values"
    assert series.tolist() == [10, 8, 6, 4, 2]
    assert series.iloc[1] == 8
    assert list(series.index) == [0, 1, 2, 3, 4]


def test_series_materializer_empty_dtype():
    """Test the dtype of empty Series results."""
    assert SeriesMaterializer().materialize(create(10, 0, 1)).dtype == "int64"
    assert SeriesMaterializer().materialize(create(0, 0.5, -0.5)).dtype == "float64"
    assert SeriesMaterializer().materialize(create(10, 0, 1), str).dtype == object


def test_series_transform_failure():
    """Test that Series materialization is fail-fast too."""
    with pytest.raises(TransformFailure):
        SeriesMaterializer().materialize(create(0, 3, 1), lambda v: 1 / (v - 1))


@pytest.mark.parametrize(
    "sink,expected",
    [
        (SinkType.LIST, ListMaterializer),
        ("list", ListMaterializer),
        ("arrow", ArrowMaterializer),
        (SinkType.SERIES, SeriesMaterializer),
    ],
)
def test_get_materializer(sink, expected):
    """Test the materializer factory."""
    assert isinstance(get_materializer(sink), expected)


def test_get_materializer_unknown_sink():
    """Test that an unknown sink raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match="Unknown sink"):
        get_materializer("numpy")


def test_materialize_sink_argument():
    """Test selecting the sink from the module-level function."""
    array = materialize(create(1, 100, 10), sink="arrow")

    assert array.to_pylist() == [1, 11, 21, 31, 41, 51, 61, 71, 81, 91]


def test_arrow_materializer_mixed_types_raise_invalid_argument():
    """Test that values Arrow cannot convert raise a package error."""
    mixed = lambda v: "odd" if v % 2 else v

    with pytest.raises(InvalidArgument, match="Arrow array") as exc_info:
        ArrowMaterializer().materialize(create(0, 4, 1), mixed)

    assert isinstance(exc_info.value.__cause__, (TypeError, ValueError))


def test_series_materializer_incompatible_dtype_raises_invalid_argument():
    """Test that values incompatible with an explicit dtype raise a package error."""
    with pytest.raises(InvalidArgument, match="int64"):
        SeriesMaterializer(dtype="int64").materialize(create(0, 3, 1), lambda v: f"item-{v}")


def test_sink_conversion_error_is_a_sequence_error():
    """Test that conversion failures stay within the package error hierarchy."""
    with pytest.raises(SequenceError):
        materialize(create(0, 4, 1), lambda v: "odd" if v % 2 else v, sink="arrow")
