"""Signing configuration for issued tokens."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Union

from .errors import EncodingError

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# Quick-start values only. Anyone who reads this source can forge tokens
# signed with DEFAULT_SECRET.
DEFAULT_SECRET = "$3creT"
DEFAULT_LIFETIME_MS = MS_PER_HOUR

Secret = Union[str, bytes]


@dataclass(frozen=True)
class TokenOptions:
    """Secret plus token lifetime in milliseconds.

    No validation happens here: an empty secret is accepted at construction
    and only rejected by ``verify``.
    """

    secret: Secret
    lifetime_ms: int

    @classmethod
    def construct(cls, secret: Secret, lifetime_ms: int) -> "TokenOptions":
        return cls(secret=secret, lifetime_ms=lifetime_ms)

    @classmethod
    def default(cls) -> "TokenOptions":
        """Return the insecure fallback options. Never use in production."""
        logger.warning("using the built-in default token secret; tokens are forgeable by anyone")
        return cls(secret=DEFAULT_SECRET, lifetime_ms=DEFAULT_LIFETIME_MS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenOptions":
        """Build options from a plain mapping.

        Accepts ``lifetime_ms`` or the older ``expires_in`` name for the
        lifetime.
        """
        secret = data.get("secret")
        lifetime = data.get("lifetime_ms", data.get("expires_in"))
        if not isinstance(secret, (str, bytes)):
            raise EncodingError("Failed to parse options: `secret` must be a string")
        if isinstance(lifetime, bool) or not isinstance(lifetime, int) or lifetime < 0:
            raise EncodingError("Failed to parse options: `lifetime_ms` must be a non-negative integer")
        return cls(secret=secret, lifetime_ms=lifetime)

    @classmethod
    def from_env(cls, prefix: str = "HMAC_JWT_") -> "TokenOptions":
        """Read ``<prefix>SECRET`` and ``<prefix>LIFETIME_MS`` from the environment.

        A missing or empty secret is an error; the insecure default is only
        ever returned by an explicit :meth:`default` call.
        """
        secret = os.getenv(f"{prefix}SECRET")
        if not secret:
            raise EncodingError(f"Failed to parse options: {prefix}SECRET is not set")
        raw_lifetime = os.getenv(f"{prefix}LIFETIME_MS", str(DEFAULT_LIFETIME_MS))
        try:
            lifetime_ms = int(raw_lifetime)
        except ValueError as exc:
            raise EncodingError(f"Failed to parse options: {prefix}LIFETIME_MS={raw_lifetime!r}") from exc
        return cls.from_dict({"secret": secret, "lifetime_ms": lifetime_ms})

    def to_dict(self) -> dict:
        return {"secret": self.secret, "lifetime_ms": self.lifetime_ms}

    def key_bytes(self) -> bytes:
        """Raw HMAC key material; the secret is used directly."""
        return secret_bytes(self.secret)

    def days(self) -> int:
        return self.lifetime_ms // MS_PER_DAY

    def hours(self) -> int:
        return self.lifetime_ms // MS_PER_HOUR

    def minutes(self) -> int:
        return self.lifetime_ms // MS_PER_MINUTE

    def seconds(self) -> int:
        return self.lifetime_ms // MS_PER_SECOND

    def __repr__(self) -> str:
        return f"TokenOptions(secret=<redacted>, lifetime_ms={self.lifetime_ms})"


def secret_bytes(secret: Secret) -> bytes:
    return secret if isinstance(secret, bytes) else secret.encode("utf-8")
