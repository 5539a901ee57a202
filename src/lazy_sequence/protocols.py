"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol

from .models import Number, PullResult


class PullSource(Protocol):
    """Protocol for pull-based value producers."""

    def next(self) -> PullResult:
        """Pull a single value."""
        ...


class Transform(Protocol):
    """Protocol for per-value transforms."""

    def __call__(self, value: Number) -> Any:
        """Transform a single value."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
