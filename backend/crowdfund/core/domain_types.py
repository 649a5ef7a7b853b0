"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProjectId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account roles — stored on the user and embedded in issued tokens."""
    USER = "user"
    ADMIN = "admin"


class MilestoneState(str, Enum):
    """Milestone lifecycle. REACHED is terminal."""
    PENDING = "pending"
    REACHED = "reached"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Identity:
    """Verified caller identity, resolved from a token on each request."""
    user_id: UserId
    role: Role = Role.USER
