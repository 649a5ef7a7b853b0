"""Credential Store — salted, cost-parameterized password hashing via bcrypt.

Invariants:
    - hash() never returns the same digest twice for the same plaintext (fresh salt per call)
    - verify() is the only equality test and never raises: malformed digests return False
    - Passwords are truncated to bcrypt's 72-byte input limit before hashing and checking

Design Decisions:
    - bcrypt over hashlib: adaptive cost factor, constant-time checkpw
    - Cost factor injected from settings (default 10), not read from a global
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class CredentialStore:
    """Hashes and verifies passwords."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        digest = bcrypt.hashpw(_encode(plaintext), bcrypt.gensalt(rounds=self.rounds))
        return digest.decode("ascii")

    def verify(self, plaintext: str, digest: str | None) -> bool:
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(_encode(plaintext), digest.encode("ascii"))
        except (ValueError, TypeError, UnicodeEncodeError) as e:
            logger.warning(f"Rejected malformed password digest: {e}")
            return False
