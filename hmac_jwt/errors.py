"""Error taxonomy for token issuance and verification."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for every issue/verify failure.

    ``reason`` is a stable machine-readable code; ``message`` is for humans.
    """

    reason = "token_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EncodingError(TokenError):
    """Payload or options cannot be represented as JSON, or signing failed."""

    reason = "encoding_failed"


class EmptySecretError(TokenError):
    """Verification was attempted with an empty key."""

    reason = "empty_secret"


class MalformedTokenError(TokenError):
    """Wrong segment count, invalid base64url, or invalid JSON."""

    reason = "malformed"


class SignatureMismatchError(TokenError):
    """Recomputed signature does not match the supplied one."""

    reason = "bad_signature"


class UnsupportedAlgorithmError(TokenError):
    """Header declares an algorithm other than HS256."""

    reason = "unsupported_algorithm"


class ExpiredTokenError(TokenError):
    """Current time is at or past the embedded expiration."""

    reason = "expired"


class NotYetValidError(TokenError):
    """Current time is before the embedded not-before (``nbf``) claim."""

    reason = "not_yet_valid"
