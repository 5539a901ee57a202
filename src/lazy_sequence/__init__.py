"""Lazy Sequence - pull-based arithmetic progressions with eager materialization."""

__version__ = "0.1.0"

from .errors import InvalidArgument, SequenceError, TransformFailure
from .materializer import (
    ArrowMaterializer,
    ListMaterializer,
    SeriesMaterializer,
    get_materializer,
    materialize,
)
from .materializer_interface import Materializer
from .models import Cursor, PullResult, SequenceDescriptor, SinkType
from .sequence_generator import SequenceGenerator

create = SequenceGenerator.create

__all__ = [
    # Core
    "SequenceGenerator",
    "create",
    "materialize",
    # Models
    "SequenceDescriptor",
    "Cursor",
    "PullResult",
    "SinkType",
    # Materializers
    "Materializer",
    "ListMaterializer",
    "ArrowMaterializer",
    "SeriesMaterializer",
    "get_materializer",
    # Errors
    "SequenceError",
    "InvalidArgument",
    "TransformFailure",
]
