"""Pull-based generator for arithmetic progressions."""

import logging
from dataclasses import replace

from .models import Cursor, Number, PullResult, SequenceDescriptor

logger = logging.getLogger(__name__)


class SequenceGenerator:
    """Produce the values of an arithmetic progression one pull at a time.

    Values are computed on demand from an immutable descriptor and a
    mutable cursor; nothing beyond the current value is ever allocated.

    A generator is one-shot. Once ``next()`` reports ``done`` it stays
    exhausted forever, and iterating the same range again requires a fresh
    generator from ``create()``. The generator is its own iterator, so a
    ``for`` loop consumes the same cursor as ``next()``.

    A generator must be consumed by a single caller; concurrent pulls on
    one instance are not supported.
    """

    def __init__(self, start: Number = 0, end: Number = 0, step: Number = 1):
        """Initialize the generator.

        Args:
            start: First value of the progression
            end: Exclusive bound, approached in the direction of ``step``
            step: Non-zero increment; a step pointing away from ``end``
                yields an empty sequence

        Raises:
            InvalidArgument: If ``step`` is zero or a bound is not a finite number
        """
        self._descriptor = SequenceDescriptor(start=start, end=end, step=step)
        self._cursor = Cursor.for_descriptor(self._descriptor)
        self._length = self._descriptor.length

        logger.debug(f"Created {self!r} ({self._length:,} values)")

    @classmethod
    def create(cls, start: Number = 0, end: Number = 0, step: Number = 1) -> "SequenceGenerator":
        """Create a generator for ``start`` up to ``end`` by ``step``."""
        return cls(start=start, end=end, step=step)

    @property
    def descriptor(self) -> SequenceDescriptor:
        return self._descriptor

    @property
    def cursor(self) -> Cursor:
        """Snapshot of the cursor state."""
        return replace(self._cursor)

    @property
    def current(self) -> Number:
        return self._cursor.current

    @property
    def exhausted(self) -> bool:
        return self._cursor.exhausted

    def next(self) -> PullResult:
        """Pull the next value.

        Returns:
            ``PullResult(value, False)`` while values remain, then
            ``PullResult(None, True)`` on every subsequent call
        """
        cursor = self._cursor
        if cursor.exhausted:
            return PullResult.exhausted()

        if cursor.index >= self._length or not self._before_end(cursor.current):
            cursor.exhausted = True
            logger.debug(f"Sequence exhausted at {cursor.current!r} after {cursor.index:,} values")
            return PullResult.exhausted()

        value = cursor.current
        cursor.index += 1
        cursor.current = self._descriptor.start + cursor.index * self._descriptor.step
        return PullResult(value=value, done=False)

    def _before_end(self, value: Number) -> bool:
        if self._descriptor.step > 0:
            return value < self._descriptor.end
        return value > self._descriptor.end

    def __iter__(self):
        return self

    def __next__(self) -> Number:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value

    def __repr__(self) -> str:
        d = self._descriptor
        return (
            f"SequenceGenerator(start={d.start!r}, end={d.end!r}, step={d.step!r}, "
            f"current={self._cursor.current!r}, exhausted={self._cursor.exhausted})"
        )
