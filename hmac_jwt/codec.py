"""Compact HS256 JSON Web Token issue and verify."""

from __future__ import annotations

import hmac
import json
import logging
import math
from hashlib import sha256
from typing import Any, Dict

from .errors import (
    EmptySecretError,
    EncodingError,
    ExpiredTokenError,
    MalformedTokenError,
    NotYetValidError,
    SignatureMismatchError,
    UnsupportedAlgorithmError,
)
from .options import MS_PER_HOUR, Secret, TokenOptions, secret_bytes
from .types import IssuedToken, JsonValue, is_json_value
from .utils.encoding import b64url_decode, b64url_encode, compact_json
from .utils.time import unix_seconds, utc_now

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
HEADER = {"alg": ALGORITHM, "typ": "JWT"}

CUSTOM_CLAIM = "custom"
FRAMING_CLAIMS = frozenset({"exp", "iat", "nbf"})
RESERVED_CLAIMS = FRAMING_CLAIMS | {CUSTOM_CLAIM}


def _sign(key: bytes, signing_input: bytes) -> str:
    return b64url_encode(hmac.new(key, signing_input, sha256).digest())


def build_claims(payload: JsonValue, *, issued_at: int, expires_at: int) -> Dict[str, Any]:
    """Frame ``payload`` as a claim set.

    Objects are flattened next to the timing claims; anything else is carried
    under the ``custom`` claim.
    """
    if isinstance(payload, dict):
        clashing = sorted(RESERVED_CLAIMS.intersection(payload))
        if clashing:
            raise EncodingError(f"Failed to parse payload: reserved claim names {clashing}")
        claims: Dict[str, Any] = dict(payload)
    else:
        claims = {CUSTOM_CLAIM: payload}
    claims["iat"] = issued_at
    claims["exp"] = expires_at
    return claims


def extract_payload(claims: Dict[str, Any]) -> JsonValue:
    """Strip the framing claims and return what the caller originally issued."""
    custom = {key: value for key, value in claims.items() if key not in FRAMING_CLAIMS}
    if list(custom) == [CUSTOM_CLAIM]:
        return custom[CUSTOM_CLAIM]
    return custom


def issue(payload: JsonValue, options: TokenOptions) -> str:
    """Sign ``payload`` into a compact JWT valid for ``options.hours()`` hours.

    The lifetime is truncated to whole hours before the expiry is computed: a
    90 minute lifetime yields a token that expires after 60 minutes, and any
    lifetime below one hour yields an already-expired token.
    """
    return issue_token(payload, options).token


def issue_token(payload: JsonValue, options: TokenOptions) -> IssuedToken:
    """Like :func:`issue` but also reports the expiry timestamp."""
    if not is_json_value(payload):
        raise EncodingError(f"Failed to parse payload: {type(payload).__name__} is not a JSON value")
    if options.lifetime_ms % MS_PER_HOUR:
        logger.warning(
            "token lifetime %d ms is truncated to %d whole hour(s)", options.lifetime_ms, options.hours()
        )

    issued_at = unix_seconds(utc_now())
    expires_at = issued_at + options.hours() * 3600
    claims = build_claims(payload, issued_at=issued_at, expires_at=expires_at)

    try:
        signing_input = f"{b64url_encode(compact_json(HEADER))}.{b64url_encode(compact_json(claims))}"
        signature = _sign(options.key_bytes(), signing_input.encode("ascii"))
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"Failed to create JWT: {exc}") from exc

    logger.debug("issued token expiring at %d", expires_at)
    return IssuedToken(token=f"{signing_input}.{signature}", expires_at=expires_at, payload=payload)


def _is_numeric_date(value: Any) -> bool:
    """JWT NumericDate: a finite int or float, never a bool."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _decode_json_object(raw: bytes, what: str) -> Dict[str, Any]:
    try:
        value = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise MalformedTokenError(f"Failed to verify token: {what} is not valid JSON") from exc
    if not isinstance(value, dict):
        raise MalformedTokenError(f"Failed to verify token: {what} is not a JSON object")
    return value


def verify(token: str, secret: Secret) -> JsonValue:
    """Check ``token`` against ``secret`` and return the issued payload.

    Raises a :class:`~hmac_jwt.errors.TokenError` subclass on the first
    failing check; nothing is returned unless every check passes.
    """
    if not secret:
        raise EmptySecretError("Secret key cannot be empty")

    if not isinstance(token, str):
        raise MalformedTokenError("Failed to verify token: token must be a string")
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedTokenError(f"Failed to verify token: expected 3 segments, got {len(parts)}")
    header_b64, claims_b64, signature_b64 = parts
    try:
        header_raw = b64url_decode(header_b64)
        claims_raw = b64url_decode(claims_b64)
        b64url_decode(signature_b64)
    except ValueError as exc:
        raise MalformedTokenError(f"Failed to verify token: {exc}") from exc

    expected = _sign(secret_bytes(secret), f"{header_b64}.{claims_b64}".encode("ascii"))
    if not hmac.compare_digest(expected, signature_b64):
        raise SignatureMismatchError("Failed to verify token: signature mismatch")

    header = _decode_json_object(header_raw, "header")
    if header.get("alg") != ALGORITHM:
        raise UnsupportedAlgorithmError(f"Failed to verify token: unsupported algorithm {header.get('alg')!r}")

    claims = _decode_json_object(claims_raw, "claims")
    exp = claims.get("exp")
    if not _is_numeric_date(exp):
        raise MalformedTokenError("Failed to verify token: `exp` claim missing or not a number")
    nbf = claims.get("nbf")
    if nbf is not None and not _is_numeric_date(nbf):
        raise MalformedTokenError("Failed to verify token: `nbf` claim is not a number")

    now = utc_now().timestamp()
    if now >= exp:
        raise ExpiredTokenError("Failed to verify token: token has expired")
    if nbf is not None and now < nbf:
        raise NotYetValidError("Failed to verify token: token is not valid yet")

    logger.debug("verified token expiring at %s", exp)
    return extract_payload(claims)
