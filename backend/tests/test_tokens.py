from datetime import datetime, timedelta, UTC

import pytest
from jose import jwt

from app.services.auth import InvalidTokenError, TokenCodec


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


T0 = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock():
    return FakeClock(T0)


def test_issue_and_verify_round_trip(clock):
    codec = TokenCodec("secret-a", ttl=timedelta(hours=1), clock=clock)
    claims = codec.verify(codec.issue("user-1", "ann@example.com"))

    assert claims.subject_id == "user-1"
    assert claims.email == "ann@example.com"
    assert claims.issued_at == int(T0.timestamp())
    assert claims.expires_at == claims.issued_at + 3600


def test_accepted_until_expiry_and_rejected_at_expiry(clock):
    codec = TokenCodec("secret-a", ttl=timedelta(seconds=60), clock=clock)
    token = codec.issue("user-1", "ann@example.com")

    clock.advance(seconds=59)
    assert codec.verify(token).subject_id == "user-1"

    clock.advance(seconds=1)
    with pytest.raises(InvalidTokenError):
        codec.verify(token)

    clock.advance(days=1)
    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_token_from_other_secret_never_verifies(clock):
    issuer = TokenCodec("secret-a", clock=clock)
    verifier = TokenCodec("secret-b", clock=clock)

    with pytest.raises(InvalidTokenError):
        verifier.verify(issuer.issue("user-1", "ann@example.com"))


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "e30.e30."])
def test_malformed_tokens_rejected(clock, token):
    codec = TokenCodec("secret-a", clock=clock)
    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_missing_claims_rejected(clock):
    codec = TokenCodec("secret-a", clock=clock)
    exp = int((T0 + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "user-1", "exp": exp, "iat": int(T0.timestamp())}, "secret-a", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_tampered_payload_rejected(clock):
    codec = TokenCodec("secret-a", clock=clock)
    header, _, signature = codec.issue("user-1", "ann@example.com").split(".")
    forged_payload = jwt.encode(
        {"sub": "admin", "email": "x@example.com", "iat": 0, "exp": 2**31},
        "whatever",
        algorithm="HS256",
    ).split(".")[1]

    with pytest.raises(InvalidTokenError):
        codec.verify(f"{header}.{forged_payload}.{signature}")


def test_failure_reasons_are_indistinguishable(clock):
    codec = TokenCodec("secret-a", ttl=timedelta(seconds=1), clock=clock)
    expired = codec.issue("user-1", "ann@example.com")
    clock.advance(seconds=5)
    wrong_secret = TokenCodec("secret-b", clock=clock).issue("user-1", "ann@example.com")

    errors = []
    for token in (expired, wrong_secret, "garbage"):
        with pytest.raises(InvalidTokenError) as exc_info:
            codec.verify(token)
        errors.append((type(exc_info.value), str(exc_info.value)))

    assert len(set(errors)) == 1


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        TokenCodec("")
