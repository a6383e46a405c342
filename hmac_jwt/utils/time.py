"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_seconds(moment: Optional[datetime] = None) -> int:
    """Return whole seconds since the epoch for ``moment`` (defaults to now)."""
    return int((moment or utc_now()).timestamp())
