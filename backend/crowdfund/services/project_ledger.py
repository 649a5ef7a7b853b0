"""Project Ledger — project creation, listing, and donation settlement.

Invariants:
    - New projects start with raised=0 and every milestone reached=False unless submitted otherwise
    - donate() loads under a row lock, applies the pure core, saves once
    - donate() on a missing project raises ResourceNotFoundError and writes nothing
    - donate() never saves a raised total past MAX_AMOUNT or a non-finite one
    - raised never decreases; reached milestones never revert

Design Decisions:
    - Arithmetic and milestone rules live in core/ledger.py; this class only
      sequences load -> apply -> save (ADR: impureim sandwich)
"""

import logging
from uuid import UUID

from crowdfund.core.domain_types import ProjectId, UserId
from crowdfund.core.errors import (
    ErrorContext, LedgerLimitExceededError, ResourceNotFoundError,
)
from crowdfund.core.ledger import (
    MAX_AMOUNT, apply_donation, exceeds_ledger_limit, new_milestones, newly_reached,
)
from crowdfund.core.repository_protocols import ProjectLike, ProjectRepository

logger = logging.getLogger(__name__)


class ProjectLedger:
    """Owns project and milestone state transitions."""

    def __init__(self, projects: ProjectRepository):
        self.projects = projects

    async def create_project(self, owner_id: UserId, fields: dict) -> ProjectLike:
        project = await self.projects.insert({
            "title": fields.get("title"),
            "description": fields.get("description"),
            "goal": fields.get("goal"),
            "category": fields.get("category"),
            "milestones": new_milestones(fields.get("milestones")),
            "social_links": fields.get("social_links"),
            "raised": 0,
            "owner_id": owner_id,
        })
        logger.info(
            f"Project created: {project.title}",
            extra={"project_id": str(project.id), "user_id": str(owner_id)},
        )
        return project

    async def list_projects(self) -> list[ProjectLike]:
        return await self.projects.find_all()

    async def get_project(self, project_id: UUID) -> ProjectLike:
        project = await self.projects.find_by_id(ProjectId(project_id))
        if project is None:
            raise ResourceNotFoundError(
                "Project", str(project_id),
                ErrorContext(project_id=str(project_id)),
            )
        return project

    async def donate(self, project_id: UUID, amount: float) -> ProjectLike:
        """Add amount to the project and settle its milestones."""
        project = await self.projects.find_by_id(
            ProjectId(project_id), for_update=True,
        )
        if project is None:
            raise ResourceNotFoundError(
                "Project", str(project_id),
                ErrorContext(project_id=str(project_id)),
            )

        before = list(project.milestones or [])
        raised, milestones = apply_donation(project.raised, amount, before)
        if exceeds_ledger_limit(raised):
            raise LedgerLimitExceededError(
                MAX_AMOUNT, ErrorContext(project_id=str(project_id)),
            )
        project = await self.projects.update(
            project, raised=raised, milestones=milestones,
        )

        reached = newly_reached(before, milestones)
        logger.info(
            f"Donation applied: +{amount} -> {raised}",
            extra={
                "project_id": str(project.id),
                "amount": amount,
                "milestones_reached": reached or None,
            },
        )
        return project
