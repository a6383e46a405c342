"""Issue a token and verify it, including the common rejection paths."""

from __future__ import annotations

import logging
import os

from hmac_jwt import TokenError, TokenOptions, TokenVerifier, issue, verify


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    secret = os.getenv("HMAC_JWT_SECRET", "change-me")
    options = TokenOptions.construct(secret, 2 * 60 * 60 * 1000)

    token = issue({"user_id": 42, "roles": ["reader"]}, options)
    print("TOKEN:", token)
    print("PAYLOAD:", verify(token, secret))

    try:
        verify(token, "wrong-secret")
    except TokenError as exc:
        print("REJECTED:", exc.reason, "-", exc.message)

    print("CHECK:", TokenVerifier(secret).check(token + "x"))


if __name__ == "__main__":
    main()
