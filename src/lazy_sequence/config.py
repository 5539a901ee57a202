"""Configuration management for the application."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgument
from .models import Number, SinkType

# Load environment variables from .env file
load_dotenv()


def _parse_number(name: str, default: str) -> Number:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be a number, got {raw!r}") from None


def _parse_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class SequenceConfig:
    """Arithmetic progression parameters."""

    start: Number = 0
    end: Number = 10
    step: Number = 1

    @classmethod
    def from_env(cls) -> "SequenceConfig":
        """Load sequence parameters from environment variables."""
        return cls(
            start=_parse_number("SEQUENCE_START", "0"),
            end=_parse_number("SEQUENCE_END", "10"),
            step=_parse_number("SEQUENCE_STEP", "1"),
        )


@dataclass
class AppConfig:
    """Application configuration parameters."""

    sink: SinkType = SinkType.LIST
    take: Optional[int] = None
    compare_pipelines: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables.

        ``SEQUENCE_TAKE`` limits how many values the lazy pipeline pulls;
        leave it unset to pull the whole range.
        """
        sink = os.getenv("SEQUENCE_SINK", "list").strip().lower()
        try:
            sink_type = SinkType(sink)
        except ValueError:
            raise InvalidArgument(
                f"Unknown sink: {sink}. Valid options: {', '.join(s.value for s in SinkType)}"
            ) from None

        take = os.getenv("SEQUENCE_TAKE") or None
        if take is not None:
            try:
                take = int(take)
            except ValueError:
                raise InvalidArgument(f"SEQUENCE_TAKE must be an integer, got {take!r}") from None
            if take < 0:
                raise InvalidArgument("SEQUENCE_TAKE must not be negative")

        return cls(
            sink=sink_type,
            take=take,
            compare_pipelines=_parse_bool("COMPARE_PIPELINES", "false"),
            verbose=_parse_bool("VERBOSE", "false"),
        )


def get_sequence_config() -> SequenceConfig:
    """Get sequence configuration."""
    return SequenceConfig.from_env()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
