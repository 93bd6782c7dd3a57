"""JSON-safe serialization of request bodies."""

from .kinds import MAX_SAFE_INTEGER, ValueKind, classify
from .transform import CIRCULAR_REFERENCE, dumps, transform_for_serialization

__all__ = [
    "CIRCULAR_REFERENCE",
    "MAX_SAFE_INTEGER",
    "ValueKind",
    "classify",
    "dumps",
    "transform_for_serialization",
]
