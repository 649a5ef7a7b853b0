"""Account Service — registration and login.

Invariants:
    - Passwords are hashed before they reach the repository
    - Duplicate email -> DuplicateEmailError (raised by the repository on the unique index)
    - Unknown email -> UserNotFoundError; wrong password -> InvalidCredentialsError
    - Login issues a token with sub=user id and the user's role

Design Decisions:
    - bcrypt runs in a worker thread: hashing at cost 10 would otherwise stall the event loop
"""

import asyncio
import logging

from crowdfund.core.domain_types import Role
from crowdfund.core.errors import (
    ErrorContext, InvalidCredentialsError, UserNotFoundError,
)
from crowdfund.core.repository_protocols import UserLike, UserRepository
from crowdfund.infrastructure.credentials import CredentialStore
from crowdfund.infrastructure.tokens import TokenService

logger = logging.getLogger(__name__)


class AccountService:
    """Registers users and exchanges credentials for tokens."""

    def __init__(
        self,
        users: UserRepository,
        credentials: CredentialStore,
        tokens: TokenService,
    ):
        self.users = users
        self.credentials = credentials
        self.tokens = tokens

    async def register(
        self, name: str, email: str, password: str, role: Role | None = None,
    ) -> UserLike:
        digest = await asyncio.to_thread(self.credentials.hash, password)
        user = await self.users.insert({
            "name": name,
            "email": email,
            "password": digest,
            "role": (role or Role.USER).value,
        })
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def login(self, email: str, password: str) -> str:
        user = await self.users.find_by_email(email)
        if user is None:
            raise UserNotFoundError()

        matches = await asyncio.to_thread(
            self.credentials.verify, password, user.password,
        )
        if not matches:
            raise InvalidCredentialsError(ErrorContext(user_id=str(user.id)))

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self.tokens.issue(user.id, {"role": user.role})
