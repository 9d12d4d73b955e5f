"""Project Routes — scoped reads and project creation.

Invariants:
    - Every handler depends on get_caller (identity resolved first)
    - Reads return denormalized row lists; a non-member gets [] with 200, never 403/404
    - Creation answers 303 with Location pointing at the new project's overview
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.api.identity import get_caller
from tracker.core.domain_types import CallerIdentity
from tracker.infrastructure.database import get_db
from tracker.schemas.project import ProjectCreate
from tracker.services.project_access import ProjectReader
from tracker.services.project_mutation import create_project

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/project", tags=["projects"])


@router.get("/all")
async def list_projects(
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Names of every project the caller is a member of."""
    return await ProjectReader(db, caller).list_projects()


@router.post("/createproject")
async def create_project_route(
    body: ProjectCreate,
    request: Request,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Create a project with the caller as Admin, then redirect to its overview."""
    project_id = await create_project(
        db, caller, body.ProjectName,
        description=body.ProjectDescription,
        status=body.ProjectStatus,
        target=body.ProjectTarget,
        start=body.ProjectStart,
    )
    return RedirectResponse(
        url=str(request.url_for("get_project_overview", project_id=str(project_id))),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/{project_id}/overview")
async def get_project_overview(
    project_id: UUID,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Project fields joined with its milestones and links."""
    return await ProjectReader(db, caller).project_overview(project_id)


@router.get("/{project_id}/issues")
async def list_issues(
    project_id: UUID,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    return await ProjectReader(db, caller).list_issues(project_id)


@router.get("/{project_id}/issue/{issue_id}")
async def get_issue_detail(
    project_id: UUID,
    issue_id: UUID,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Issue with its milestone and every activity entry (empty without activity)."""
    return await ProjectReader(db, caller).issue_detail(project_id, issue_id)
