"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Repositories return records shaped like UserLike/ProjectLike so services
      never depend on the ORM classes directly
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from crowdfund.core.domain_types import UserId, ProjectId


class UserLike(Protocol):
    """Structural contract for persisted users."""
    id: UUID
    name: str
    email: str
    password: str
    role: str
    created_at: datetime


class ProjectLike(Protocol):
    """Structural contract for persisted projects.

    owner is loaded eagerly by the repository for display only; ownership is
    written once through owner_id at creation.
    """
    id: UUID
    title: str
    description: str | None
    goal: float | None
    raised: float
    category: str | None
    milestones: list
    owner_id: UUID
    owner: UserLike | None
    social_links: dict | None
    created_at: datetime


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def find_by_email(self, email: str) -> UserLike | None: ...
    async def insert(self, user_data: dict) -> UserLike: ...


class ProjectRepository(Protocol):
    """Contract for project persistence — implemented by shell."""
    async def find_by_id(
        self, project_id: ProjectId, for_update: bool = False,
    ) -> ProjectLike | None: ...
    async def find_all(self) -> list[ProjectLike]: ...
    async def insert(self, project_data: dict) -> ProjectLike: ...
    async def update(self, project: ProjectLike, **fields: object) -> ProjectLike: ...
