"""Request Dependencies — service wiring and the Access Gate.

Invariants:
    - TokenService and CredentialStore are built from Settings, never from module globals
    - require_identity is a pure guard: it rejects or annotates, nothing else
    - Missing/empty Authorization header -> UnauthorizedError (before any handler logic)
    - Token rejected by TokenService -> InvalidTokenError
    - Success -> Identity stored on request.state.identity and returned

Design Decisions:
    - Raw token in the Authorization header (no scheme); a "Bearer " prefix is
      also stripped so standard HTTP clients work unchanged; a header that is
      present but holds no usable token still goes to verification (400)
    - Providers are plain Depends() functions: tests swap them through
      app.dependency_overrides instead of monkeypatching
"""

import logging
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from crowdfund.config import Settings, get_settings
from crowdfund.core.domain_types import Identity, Role, UserId
from crowdfund.core.errors import InvalidTokenError, UnauthorizedError
from crowdfund.infrastructure.credentials import CredentialStore
from crowdfund.infrastructure.database import get_db
from crowdfund.infrastructure.tokens import TokenService
from crowdfund.services.account_service import AccountService
from crowdfund.services.project_ledger import ProjectLedger
from crowdfund.services.repositories import SqlProjectRepository, SqlUserRepository

logger = logging.getLogger(__name__)

AUTH_HEADER = "Authorization"
BEARER_SCHEME = "bearer"


def get_app_settings() -> Settings:
    return get_settings()


def get_token_service(
    settings: Settings = Depends(get_app_settings),
) -> TokenService:
    return TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )


def get_credential_store(
    settings: Settings = Depends(get_app_settings),
) -> CredentialStore:
    return CredentialStore(rounds=settings.bcrypt_rounds)


def get_account_service(
    db: AsyncSession = Depends(get_db),
    credentials: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(SqlUserRepository(db), credentials, tokens)


def get_project_ledger(db: AsyncSession = Depends(get_db)) -> ProjectLedger:
    return ProjectLedger(SqlProjectRepository(db))


# ─── Access Gate ────────────────────────────────────────────────

def extract_token(header_value: str | None) -> str | None:
    """Pull the raw token out of an Authorization header value."""
    if not header_value:
        return None
    value = header_value.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME and rest.strip():
        return rest.strip()
    return value or header_value


def identity_from_claims(claims: dict) -> Identity:
    """Build an Identity from verified claims. Unusable claims -> InvalidTokenError."""
    try:
        user_id = UserId(UUID(str(claims["sub"])))
        role = Role(claims.get("role") or Role.USER.value)
    except (KeyError, ValueError) as e:
        raise InvalidTokenError(f"unusable claims: {e}")
    return Identity(user_id=user_id, role=role)


async def require_identity(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Guard for authenticated routes."""
    token = extract_token(request.headers.get(AUTH_HEADER))
    if token is None:
        raise UnauthorizedError()

    try:
        identity = identity_from_claims(tokens.verify(token))
    except InvalidTokenError as e:
        logger.warning(
            f"Token rejected: {e.reason}",
            extra={"path": request.url.path, "error_code": e.code},
        )
        raise

    request.state.identity = identity
    return identity
