"""Token Service — issues and verifies signed, time-limited identity tokens (JWT).

Invariants:
    - Every issued token carries sub (user id), iat, and exp = issuance + ttl
    - verify() returns claims only after signature AND expiry both check out
    - A token is expired once now >= exp (no leeway)
    - Every failure surfaces as InvalidTokenError; nothing partially trusted

Design Decisions:
    - PyJWT with HS256 and a secret injected at construction (ADR: no process-wide key)
    - Expiry checked against an injectable clock instead of PyJWT's wall clock,
      so lifetime behavior is testable without patching time
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from crowdfund.core.errors import InvalidTokenError

DEFAULT_TTL_SECONDS = 3600


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Signs and verifies identity tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    def issue(self, subject_id: object, claims: dict | None = None) -> str:
        """Sign a token for subject_id with extra claims (e.g. role)."""
        now = self._clock()
        payload = {
            **(claims or {}),
            "sub": str(subject_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict:
        """Return verified claims or raise InvalidTokenError."""
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp"],
                },
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e))

        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("exp claim is not a timestamp")
        if self._clock().timestamp() >= exp:
            raise InvalidTokenError("token expired")
        return claims
