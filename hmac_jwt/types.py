"""Token datatypes and JSON-value validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Union

JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]


def is_json_value(value: object) -> bool:
    """Return True when ``value`` is built only from JSON types.

    Walks containers with an explicit stack so nesting depth is not bounded
    by the interpreter's recursion limit. Each container is visited once;
    reference cycles are left for the encoder to reject.
    """
    pending = [value]
    seen = set()
    while pending:
        item = pending.pop()
        if item is None or isinstance(item, (bool, int, str)):
            continue
        if isinstance(item, float):
            if not math.isfinite(item):
                return False
            continue
        if not isinstance(item, (list, dict)):
            return False
        if id(item) in seen:
            continue
        seen.add(id(item))
        if isinstance(item, list):
            pending.extend(item)
        elif not all(isinstance(key, str) for key in item):
            return False
        else:
            pending.extend(item.values())
    return True


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: int
    payload: JsonValue


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    payload: JsonValue = None
