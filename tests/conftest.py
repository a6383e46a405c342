from datetime import datetime, timedelta, timezone

import pytest


class FrozenClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FrozenClock:
    frozen = FrozenClock()
    monkeypatch.setattr("hmac_jwt.codec.utc_now", frozen)
    return frozen
