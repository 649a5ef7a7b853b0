"""User ORM — persists registered accounts.

Invariants:
    - email is unique (enforced by the database, surfaced as DuplicateEmailError)
    - password holds the bcrypt digest, never plaintext
    - role is one of Role values, default "user"
    - Rows are never mutated after registration

Design Decisions:
    - Uniqueness left to the unique index instead of a pre-check query: one
      round-trip and no check-then-insert window
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from crowdfund.db.base import Base
from crowdfund.core.domain_types import Role


class User(Base):
    """Registered account."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Role.USER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
