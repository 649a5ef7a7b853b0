"""SQL Repositories — SQLAlchemy-async implementations of the repository protocols.

Invariants:
    - Each write commits exactly once (whole-document save)
    - A unique-email violation on insert becomes DuplicateEmailError, session rolled back
    - find_by_id(for_update=True) takes a row lock held until the next commit/rollback
    - find_all returns projects in insertion order (created_at ascending)

Design Decisions:
    - Row lock over optimistic versioning for donations: donations never fail
      with a conflict, concurrent donors simply queue on the row
    - SQLite ignores FOR UPDATE; the test suite runs single-writer anyway
"""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crowdfund.core.domain_types import UserId, ProjectId
from crowdfund.core.errors import DuplicateEmailError
from crowdfund.models.project import Project
from crowdfund.models.user import User

logger = logging.getLogger(__name__)


def select_project(project_id: ProjectId, for_update: bool = False) -> Select:
    """Project lookup by id; for_update adds the row lock used by donations."""
    query = select(Project).where(Project.id == project_id)
    if for_update:
        query = query.with_for_update()
    return query


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def insert(self, user_data: dict) -> User:
        user = User(**user_data)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmailError(user_data.get("email", ""))
        return user


class SqlProjectRepository:
    """Project persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(
        self, project_id: ProjectId, for_update: bool = False,
    ) -> Project | None:
        result = await self.db.execute(select_project(project_id, for_update))
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Project]:
        result = await self.db.execute(
            select(Project).order_by(Project.created_at.asc()),
        )
        return list(result.scalars().all())

    async def insert(self, project_data: dict) -> Project:
        project = Project(**project_data)
        self.db.add(project)
        await self.db.commit()
        await self.db.refresh(project, attribute_names=["owner"])
        return project

    async def update(self, project: Project, **fields: object) -> Project:
        for name, value in fields.items():
            setattr(project, name, value)
        await self.db.commit()
        return project
