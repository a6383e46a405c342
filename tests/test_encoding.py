import pytest

from hmac_jwt.utils.encoding import b64url_decode, b64url_encode, compact_json


def test_b64url_encode_has_no_padding() -> None:
    assert b64url_encode(b"\xfb\xff") == "-_8"
    assert b64url_decode("-_8") == b"\xfb\xff"


@pytest.mark.parametrize("segment", ["-_8=", "+/8", "ab c", "abcde", "é"])
def test_b64url_decode_is_strict(segment: str) -> None:
    with pytest.raises(ValueError):
        b64url_decode(segment)


def test_compact_json_rejects_nan() -> None:
    assert compact_json({"a": [1, "b"]}) == b'{"a":[1,"b"]}'
    with pytest.raises(ValueError):
        compact_json(float("nan"))
