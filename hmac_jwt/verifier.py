"""Issuer and verifier objects bound to one configuration."""

from __future__ import annotations

import logging
from typing import Optional

from . import codec
from .errors import TokenError
from .options import Secret, TokenOptions
from .types import IssuedToken, JsonValue, VerificationResult

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Issue tokens with fixed options (read from the environment when omitted)."""

    def __init__(self, options: Optional[TokenOptions] = None) -> None:
        self.options = options or TokenOptions.from_env()

    def issue(self, payload: JsonValue) -> IssuedToken:
        return codec.issue_token(payload, self.options)


class TokenVerifier:
    """Verify tokens against one secret.

    ``verify`` raises the codec's errors; ``check`` folds them into a
    :class:`VerificationResult` for callers that branch on a reason code.
    """

    def __init__(self, secret: Optional[Secret] = None) -> None:
        self._secret = secret if secret is not None else TokenOptions.from_env().secret

    def verify(self, token: str) -> JsonValue:
        return codec.verify(token, self._secret)

    def check(self, token: str) -> VerificationResult:
        try:
            payload = self.verify(token)
        except TokenError as exc:
            logger.debug("token rejected: %s", exc.reason)
            return VerificationResult(False, exc.reason)
        return VerificationResult(True, "ok", payload=payload)
