"""hmac_jwt package.

Compact HS256 JSON Web Tokens carrying an arbitrary JSON payload, signed
with a shared secret.
"""

from .codec import issue, issue_token, verify
from .errors import (
    EmptySecretError,
    EncodingError,
    ExpiredTokenError,
    MalformedTokenError,
    NotYetValidError,
    SignatureMismatchError,
    TokenError,
    UnsupportedAlgorithmError,
)
from .options import TokenOptions
from .types import IssuedToken, JsonValue, VerificationResult
from .verifier import TokenIssuer, TokenVerifier

__all__ = [
    "issue",
    "issue_token",
    "verify",
    "TokenOptions",
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "JsonValue",
    "VerificationResult",
    "TokenError",
    "EncodingError",
    "EmptySecretError",
    "MalformedTokenError",
    "NotYetValidError",
    "SignatureMismatchError",
    "UnsupportedAlgorithmError",
    "ExpiredTokenError",
]
