"""Data models for sequence descriptors, cursors and pull results."""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, NamedTuple, Optional, Union

from .errors import InvalidArgument

Number = Union[int, float]


class SinkType(str, Enum):
    """Materializer sink enumeration."""

    LIST = "list"
    ARROW = "arrow"
    SERIES = "series"


class PullResult(NamedTuple):
    """Tagged result of a single pull."""

    value: Optional[Number]
    done: bool

    @classmethod
    def exhausted(cls) -> "PullResult":
        """Create the terminal pull result."""
        return cls(value=None, done=True)


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a real number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class SequenceDescriptor:
    """Immutable parameters of an arithmetic progression."""

    start: Number = 0
    end: Number = 0
    step: Number = 1

    def __post_init__(self):
        """Validate descriptor after initialization."""
        _check_number("start", self.start)
        _check_number("end", self.end)
        _check_number("step", self.step)
        if self.step == 0:
            raise InvalidArgument("step must not be zero")

    @property
    def is_well_founded(self) -> bool:
        """True when the progression moves toward ``end``."""
        if self.step > 0:
            return self.end > self.start
        return self.end < self.start

    @property
    def length(self) -> int:
        """Number of values the progression yields."""
        if not self.is_well_founded:
            return 0
        return math.ceil((self.end - self.start) / self.step)

    @property
    def is_integral(self) -> bool:
        """True when start, end and step are all integers."""
        return all(isinstance(v, int) for v in (self.start, self.end, self.step))


@dataclass
class Cursor:
    """Mutable progress state of a single generator.

    ``current`` is always ``start + index * step``, never a running sum.
    """

    current: Number
    exhausted: bool = False
    index: int = 0

    @classmethod
    def for_descriptor(cls, descriptor: SequenceDescriptor) -> "Cursor":
        """Create a cursor positioned at the start of ``descriptor``."""
        return cls(current=descriptor.start, exhausted=not descriptor.is_well_founded)


@dataclass
class ConsumptionStatistics:
    """Statistics for a consumption pipeline run."""

    values_pulled: int = 0
    exhausted: bool = False
    elapsed_time: float = 0.0
    last_value: Any = None
