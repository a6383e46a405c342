"""Utility helpers for encoding and time operations."""

from .encoding import b64url_decode, b64url_encode, compact_json
from .time import unix_seconds, utc_now

__all__ = ["b64url_encode", "b64url_decode", "compact_json", "utc_now", "unix_seconds"]
