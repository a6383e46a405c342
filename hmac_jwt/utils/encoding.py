"""Compact JSON and unpadded base64url helpers for token segments."""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def compact_json(value: Any) -> bytes:
    """Return compact UTF-8 JSON bytes. Non-finite floats are rejected."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


def b64url_encode(raw: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Strictly decode an unpadded base64url segment.

    Raises ``ValueError`` for padding, characters outside the URL-safe
    alphabet, or an impossible segment length.
    """
    if not _B64URL_RE.fullmatch(segment):
        raise ValueError("segment is not unpadded base64url")
    if len(segment) % 4 == 1:
        raise ValueError("segment has an invalid base64url length")
    try:
        return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc
