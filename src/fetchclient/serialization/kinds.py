"""Value shapes recognised by the serializer."""

import dataclasses
import datetime
import decimal
from collections.abc import Mapping, Sequence, Set
from enum import Enum, auto
from typing import Any

from pydantic import BaseModel


# Largest integer a JSON consumer can hold without losing precision (IEEE-754 double).
MAX_SAFE_INTEGER = 2**53 - 1

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


class ValueKind(Enum):
    """Closed set of shapes a value can take during serialization."""
    PRIMITIVE = auto()   # None, str, bool, float, safe int: passed through
    BIG_NUMBER = auto()  # int beyond the safe range, Decimal: decimal string
    DATE_TIME = auto()   # datetime, date, time: ISO-8601 string
    MAP_LIKE = auto()    # Mappings that are not plain string-keyed dicts
    SET_LIKE = auto()    # set, frozenset
    SEQUENCE = auto()    # list, tuple
    KEYED = auto()       # string-keyed dicts, dataclasses, pydantic models
    OPAQUE = auto()      # anything else: left for json.dumps to accept or reject


COMPOSITE_KINDS = frozenset({
    ValueKind.MAP_LIKE,
    ValueKind.SET_LIKE,
    ValueKind.SEQUENCE,
    ValueKind.KEYED,
})


def classify(value: Any) -> ValueKind:
    """Return the `ValueKind` for `value`. Enum members classify as their value."""
    if isinstance(value, Enum):
        return classify(value.value)
    if value is None or isinstance(value, (str, bool, float)):
        return ValueKind.PRIMITIVE
    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return ValueKind.PRIMITIVE
        return ValueKind.BIG_NUMBER
    if isinstance(value, decimal.Decimal):
        return ValueKind.BIG_NUMBER
    if isinstance(value, (datetime.date, datetime.time)):
        return ValueKind.DATE_TIME
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return ValueKind.KEYED
    if isinstance(value, Mapping):
        return ValueKind.MAP_LIKE
    if isinstance(value, Set):
        return ValueKind.SET_LIKE
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.SEQUENCE
    if isinstance(value, BaseModel):
        return ValueKind.KEYED
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ValueKind.KEYED
    return ValueKind.OPAQUE
