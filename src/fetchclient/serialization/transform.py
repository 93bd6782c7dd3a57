"""
Recursive JSON-safe transform.

Rules, in priority order:
  - big numbers become decimal strings
  - dates and times become ISO-8601 strings
  - map-like values become {"type": "Map", "value": [[key, value], ...]}
  - set-like values become {"type": "Set", "value": [item, ...]}
  - primitives pass through (non-finite floats become None)
  - sequences and keyed composites are walked recursively

A composite that is already being walked further up the current path is
replaced with CIRCULAR_REFERENCE. Identities are popped when their subtree is
done, so the same object reached through two siblings is serialized twice.
"""

import dataclasses
import json
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .kinds import COMPOSITE_KINDS, ValueKind, classify


CIRCULAR_REFERENCE = "[Circular Reference]"


def transform_for_serialization(value: Any) -> Any:
    """Return a JSON-encodable equivalent of `value`."""
    return _transform(value, set())


def dumps(value: Any) -> str:
    """Transform `value` and encode it as a JSON string."""
    return json.dumps(transform_for_serialization(value), allow_nan=False)


def _transform(value: Any, path: set[int]) -> Any:
    if isinstance(value, Enum):
        value = value.value

    kind = classify(value)
    if kind not in COMPOSITE_KINDS:
        return _transform_scalar(value, kind)

    identity = id(value)
    if identity in path:
        return CIRCULAR_REFERENCE

    path.add(identity)
    try:
        return _transform_composite(value, kind, path)
    finally:
        path.discard(identity)


def _transform_scalar(value: Any, kind: ValueKind) -> Any:
    match kind:
        case ValueKind.BIG_NUMBER:
            return str(value)
        case ValueKind.DATE_TIME:
            return value.isoformat()
        case _:
            # NaN and the infinities have no JSON form; they go out as null.
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return value


def _transform_composite(value: Any, kind: ValueKind, path: set[int]) -> Any:
    match kind:
        case ValueKind.MAP_LIKE:
            return {
                "type": "Map",
                "value": [
                    [_transform(k, path), _transform(v, path)]
                    for k, v in value.items()
                ],
            }
        case ValueKind.SET_LIKE:
            return {
                "type": "Set",
                "value": [_transform(item, path) for item in value],
            }
        case ValueKind.SEQUENCE:
            return [_transform(item, path) for item in value]
        case ValueKind.KEYED:
            return {k: _transform(v, path) for k, v in _fields(value)}
        case _:  # pragma: no cover
            raise ValueError(f"not a composite kind: {kind}")


def _fields(value: Any):
    if isinstance(value, dict):
        return value.items()
    if isinstance(value, BaseModel):
        # Iterating a model yields (field, value) pairs without copying nested models.
        return list(value)
    return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
