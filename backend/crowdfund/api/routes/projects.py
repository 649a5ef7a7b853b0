"""Project Routes — create, list, read, and donate.

Invariants:
    - POST /projects requires a valid token (Access Gate); owner = token subject
    - GET /projects and GET /projects/{id} are public
    - POST /projects/{id}/donate → 200 {message, project} or 404 RESOURCE_NOT_FOUND
    - Owner is projected to {id, name}; no other user fields leave the API

Design Decisions:
    - Donations are public (no token), matching the original contract
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from crowdfund.core.domain_types import Identity
from crowdfund.core.repository_protocols import ProjectLike
from crowdfund.schemas.project import DonationCreate, ProjectCreate
from crowdfund.services.project_ledger import ProjectLedger
from crowdfund.api.dependencies import get_project_ledger, require_identity

router = APIRouter(prefix="/projects", tags=["projects"])


def project_view(project: ProjectLike) -> dict:
    owner = project.owner
    return {
        "id": str(project.id),
        "title": project.title,
        "description": project.description,
        "goal": project.goal,
        "raised": project.raised,
        "category": project.category,
        "milestones": list(project.milestones or []),
        "owner": (
            {"id": str(owner.id), "name": owner.name} if owner
            else {"id": str(project.owner_id), "name": None}
        ),
        "socialLinks": project.social_links,
        "createdAt": (
            project.created_at.isoformat() if project.created_at else None
        ),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate,
    identity: Identity = Depends(require_identity),
    ledger: ProjectLedger = Depends(get_project_ledger),
):
    project = await ledger.create_project(
        identity.user_id, body.model_dump(),
    )
    return project_view(project)


@router.get("")
async def list_projects(ledger: ProjectLedger = Depends(get_project_ledger)):
    return [project_view(p) for p in await ledger.list_projects()]


@router.get("/{project_id}")
async def get_project(
    project_id: UUID, ledger: ProjectLedger = Depends(get_project_ledger),
):
    return project_view(await ledger.get_project(project_id))


@router.post("/{project_id}/donate")
async def donate(
    project_id: UUID,
    body: DonationCreate,
    ledger: ProjectLedger = Depends(get_project_ledger),
):
    project = await ledger.donate(project_id, body.amount)
    return {"message": "Donation successful", "project": project_view(project)}
