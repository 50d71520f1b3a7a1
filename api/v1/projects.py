"""Project endpoints: submission, listing, workflow transitions and admin edits."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_db
from models.project import (
    Pillar,
    ProjectCreate,
    ProjectDecision,
    ProjectResponse,
    ProjectStatus,
    ProjectUpdate,
    PublicProjectSummary,
)
from models.user import User
from services.projects_service import (
    decide_project,
    delete_project,
    get_project,
    list_my_projects,
    list_projects,
    list_public_projects,
    review_project,
    submit_project,
    update_project,
)

router = APIRouter()


@router.get("/projects/public", response_model=List[PublicProjectSummary])
async def list_public_projects_endpoint(db: AsyncSession = Depends(get_db)):
    """
    List approved projects. No authentication required.
    """
    return await list_public_projects(db)


@router.get("/projects/my-projects", response_model=List[ProjectResponse])
async def list_my_projects_endpoint(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's own submissions, newest first.
    """
    return await list_my_projects(db, current_user=current_user)


@router.get("/projects", response_model=List[ProjectResponse])
async def list_projects_endpoint(
    status_filter: ProjectStatus | None = Query(None, alias="status"),
    country: str | None = Query(None),
    pillar: Pillar | None = Query(None),
    submitted_by: UUID | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List projects.

    Focal persons, approvers and admins see every project; other users only
    see their own submissions.

    Returns:
        List of projects, newest first.
    """
    return await list_projects(
        db,
        current_user=current_user,
        status=status_filter,
        country=country,
        pillar=pillar,
        submitted_by=submitted_by,
    )


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def submit_project_endpoint(
    project_data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Submit a new project. It starts in the pending state.

    Note: status and submitted_by in the request are ignored.
    """
    return await submit_project(db, current_user=current_user, payload=project_data)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project_endpoint(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific project by ID.

    Raises:
        404 if project not found or the caller may not see it.
    """
    return await get_project(db, current_user=current_user, project_id=project_id)


@router.post("/projects/{project_id}/review", response_model=ProjectResponse)
async def review_project_endpoint(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Move a pending project to under_review (focal person or admin).

    Raises:
        403 if the caller may not review, 404 if the project is unknown,
        409 if the project is not pending.
    """
    return await review_project(db, current_user=current_user, project_id=project_id)


@router.post("/projects/{project_id}/approve", response_model=ProjectResponse)
async def decide_project_endpoint(
    project_id: UUID,
    decision: ProjectDecision,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Approve (``{"approved": true}``) or reject (``{"approved": false}``) a
    project under review (approver or admin).

    Raises:
        403 if the caller may not decide, 404 if the project is unknown,
        409 if the project is not awaiting a decision.
    """
    return await decide_project(
        db,
        current_user=current_user,
        project_id=project_id,
        approved=decision.approved,
    )


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
async def update_project_endpoint(
    project_id: UUID,
    project_data: ProjectUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Administrator direct edit. Only provided fields are updated and the
    workflow is bypassed.
    """
    return await update_project(
        db,
        current_user=current_user,
        project_id=project_id,
        payload=project_data,
    )


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_endpoint(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Permanently delete a project (admin only).
    """
    await delete_project(db, current_user=current_user, project_id=project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
