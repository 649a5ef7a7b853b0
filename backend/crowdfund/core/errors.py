"""Error Hierarchy — typed, categorized exceptions for all Crowdfund failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CrowdfundError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Auth failures keep the status codes clients already depend on: a missing
      credential is 401, a rejected token and login mismatches are 400
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    project_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CrowdfundError(Exception):
    """Base exception for all Crowdfund errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Authentication Errors ──────────────────────────────────────

class UnauthorizedError(CrowdfundError):
    """Request carried no credential at all."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Access Denied", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(CrowdfundError):
    """Token is malformed, expired, or carries a bad signature."""
    def __init__(self, reason: str = "", context: ErrorContext | None = None):
        super().__init__(
            "Invalid Token", "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


class UserNotFoundError(CrowdfundError):
    """Login attempted with an email that has no account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(CrowdfundError):
    """Password does not match the stored hash."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 400,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class DuplicateEmailError(CrowdfundError):
    """Registration collided with an existing account email."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "Email already exists", "EMAIL_ALREADY_EXISTS",
            ErrorCategory.CONFLICT, ErrorSeverity.ERROR, context, 400,
        )
        self.email = email


class LedgerLimitExceededError(CrowdfundError):
    """Donation would push raised past the ledger ceiling."""
    def __init__(self, limit: float, context: ErrorContext | None = None):
        super().__init__(
            f"Donation would exceed the maximum raised amount of {limit:g}",
            "LEDGER_LIMIT_EXCEEDED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.limit = limit


class ResourceNotFoundError(CrowdfundError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CrowdfundError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
