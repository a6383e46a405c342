import pytest

from hmac_jwt import EncodingError, SignatureMismatchError, TokenIssuer, TokenOptions, TokenVerifier, issue


def test_issuer_and_verifier_round_trip(clock) -> None:
    issued = TokenIssuer(TokenOptions("unit-secret", 3_600_000)).issue({"session": "abc"})
    assert issued.expires_at == int(clock.now.timestamp()) + 3600
    assert issued.payload == {"session": "abc"}

    verifier = TokenVerifier("unit-secret")
    assert verifier.verify(issued.token) == {"session": "abc"}

    result = verifier.check(issued.token)
    assert result.valid is True
    assert result.reason == "ok"
    assert result.payload == {"session": "abc"}


def test_check_reports_reason_codes(clock) -> None:
    issued = TokenIssuer(TokenOptions("unit-secret", 3_600_000)).issue({"session": "abc"})

    assert TokenVerifier("other").check(issued.token).reason == "bad_signature"
    assert TokenVerifier("").check(issued.token).reason == "empty_secret"
    assert TokenVerifier("unit-secret").check("not-a-jwt").reason == "malformed"

    clock.advance(hours=1)
    expired = TokenVerifier("unit-secret").check(issued.token)
    assert expired.valid is False
    assert expired.reason == "expired"
    assert expired.payload is None


def test_verify_raises_typed_errors(clock) -> None:
    issued = TokenIssuer(TokenOptions("unit-secret", 3_600_000)).issue([1, 2])
    with pytest.raises(SignatureMismatchError):
        TokenVerifier("nope").verify(issued.token)


def test_configuration_falls_back_to_environment(clock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HMAC_JWT_SECRET", "env-secret")
    monkeypatch.setenv("HMAC_JWT_LIFETIME_MS", "7200000")
    issued = TokenIssuer().issue({"a": 1})
    assert issued.expires_at == int(clock.now.timestamp()) + 7200
    assert TokenVerifier().verify(issued.token) == {"a": 1}
    assert TokenVerifier("env-secret").verify(issued.token) == {"a": 1}


def test_unconfigured_wrappers_refuse_the_default_secret(clock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HMAC_JWT_SECRET", raising=False)
    forged = issue({"role": "admin"}, TokenOptions.default())
    with pytest.raises(EncodingError):
        TokenVerifier()
    with pytest.raises(EncodingError):
        TokenIssuer()
    assert TokenVerifier("unit-secret").check(forged).reason == "bad_signature"
