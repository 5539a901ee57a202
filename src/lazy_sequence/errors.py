"""Exception hierarchy for lazy sequences."""

from typing import Any, Optional


class SequenceError(Exception):
    """Base class for all lazy sequence errors."""


class InvalidArgument(SequenceError, ValueError):
    """Raised when a sequence, sink or configuration value is invalid."""


class TransformFailure(SequenceError):
    """Raised when a transform fails during materialization.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, index: int, value: Any, original: Optional[BaseException] = None):
        """
        Initialize transform failure.

        Args:
            index: Zero-based pull index of the failing value
            value: Input value the transform failed on
            original: Exception raised by the transform
        """
        self.index = index
        self.value = value
        self.original = original
        reason = f"{type(original).__name__}: {original}" if original else "unknown error"
        super().__init__(f"Transform failed at index {index} (value={value!r}): {reason}")
