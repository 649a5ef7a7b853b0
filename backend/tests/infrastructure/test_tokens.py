"""Token Service — verifies issuance claims, signature checks, and the 1-hour lifetime.

Tests cover:
    - issued tokens carry sub, role, iat, exp = iat + 3600
    - accepted at T+59min, rejected at T+61min and exactly at expiry
    - tampered, foreign-key, malformed, and unsigned tokens rejected
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from crowdfund.core.errors import InvalidTokenError
from crowdfund.infrastructure.tokens import TokenService

SECRET = "unit-test-secret-key-with-32-bytes!!"
T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(T0)


@pytest.fixture
def tokens(clock):
    return TokenService(SECRET, clock=clock)


def test_issue_embeds_subject_role_and_expiry(tokens):
    user_id = uuid4()
    claims = tokens.verify(tokens.issue(user_id, {"role": "admin"}))
    assert claims["sub"] == str(user_id)
    assert claims["role"] == "admin"
    assert claims["exp"] - claims["iat"] == 3600


def test_token_accepted_before_expiry(tokens, clock):
    token = tokens.issue(uuid4())
    clock.now = T0 + timedelta(minutes=59)
    assert tokens.verify(token)["sub"]


def test_token_rejected_after_expiry(tokens, clock):
    token = tokens.issue(uuid4())
    clock.now = T0 + timedelta(minutes=61)
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_token_rejected_at_exact_expiry(tokens, clock):
    token = tokens.issue(uuid4())
    clock.now = T0 + timedelta(hours=1)
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_token_signed_with_other_secret_rejected(clock):
    foreign = TokenService("another-secret-key-also-32-bytes-long", clock=clock)
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET, clock=clock).verify(foreign.issue(uuid4()))


def test_tampered_payload_rejected(tokens):
    header, payload, signature = tokens.issue(uuid4()).split(".")
    forged = jwt.encode({"sub": "x", "exp": 9_999_999_999}, "guess", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join([header, forged.split(".")[1], signature]))


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
def test_malformed_token_rejected(tokens, garbage):
    with pytest.raises(InvalidTokenError):
        tokens.verify(garbage)


def test_unsigned_token_rejected(tokens):
    unsigned = jwt.encode(
        {"sub": "x", "exp": int((T0 + timedelta(hours=1)).timestamp())},
        None, algorithm="none",
    )
    with pytest.raises(InvalidTokenError):
        tokens.verify(unsigned)


def test_token_without_exp_rejected(tokens):
    token = jwt.encode({"sub": "x"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_custom_ttl(clock):
    service = TokenService(SECRET, ttl_seconds=60, clock=clock)
    token = service.issue(uuid4())
    clock.now = T0 + timedelta(seconds=61)
    with pytest.raises(InvalidTokenError):
        service.verify(token)
