"""Service layer for Project business logic: submission, workflow and admin edits."""

import enum
import logging
from datetime import datetime, UTC
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

import config
from auth.permissions import Operation, is_privileged, require
from db import commit
from models.notification import NotificationType
from models.project import Project, ProjectCreate, ProjectStatus, ProjectUpdate
from models.user import User
from repos import countries_repo, projects_repo
from services import notifications_service
from services.errors import NotFoundError, PermissionDeniedError, ValidationError
from services.workflow import check_transition, decision_status

logger = logging.getLogger(__name__)

# Text fields a project cannot exist without
REQUIRED_TEXT_FIELDS = (
    "project_title",
    "project_summary",
    "country",
    "implementing_entity",
    "project_type",
    "contact_person",
    "contact_details",
    "project_description",
)

# Columns that must never be written as NULL, even by an administrator
NON_NULLABLE_FIELDS = frozenset(
    REQUIRED_TEXT_FIELDS
    + (
        "region",
        "pifah_pillar",
        "current_stage",
        "status",
        "regional_integration_potential",
        "government_approvals",
        "contribution_areas",
        "support_required",
    )
)


def _strict(strict: bool | None) -> bool:
    return config.settings.STRICT_TRANSITIONS if strict is None else strict


def _column_value(value):
    return value.value if isinstance(value, enum.Enum) else value


async def _validate_country(session: AsyncSession, country: str) -> None:
    """
    Check the country name against the reference table.

    An empty reference table accepts any name so the workflow does not depend
    on the countries having been seeded.
    """
    known = await countries_repo.ids_by_name(session)
    if known and country not in known:
        raise ValidationError("country", f"Unknown country '{country}'")


async def _get_or_404(session: AsyncSession, project_id: UUID) -> Project:
    project = await projects_repo.get_by_id(session, project_id=project_id)
    if not project:
        raise NotFoundError("Project")
    return project


async def submit_project(
    session: AsyncSession,
    *,
    current_user: User,
    payload: ProjectCreate,
) -> Project:
    """
    Create a project in the pending state.

    Args:
        session: Database session
        current_user: Submitting user
        payload: Proposal data

    Returns:
        Created project

    Raises:
        PermissionDeniedError: If the caller may not submit
        ValidationError: If a required field is blank or the country is unknown
    """
    require(current_user.role, Operation.SUBMIT_PROJECT)

    data = payload.model_dump()
    for field in REQUIRED_TEXT_FIELDS:
        if not data[field].strip():
            raise ValidationError(field, "This field is required")
    await _validate_country(session, data["country"])

    project = Project(
        **{key: _column_value(value) for key, value in data.items()},
        submitted_by=current_user.id,
        status=ProjectStatus.PENDING.value,
        reviewed_by=None,
        reviewed_at=None,
        approved_by=None,
        approved_at=None,
    )

    created_project = await projects_repo.create(session, project)
    notifications_service.emit(
        session,
        project=created_project,
        notification_type=NotificationType.SUBMISSION,
    )
    await commit(session)
    await session.refresh(created_project)

    logger.info(
        "Project %s submitted by %s (country=%s, pillar=%s)",
        created_project.id,
        current_user.id,
        created_project.country,
        created_project.pifah_pillar,
    )
    return created_project


async def list_projects(
    session: AsyncSession,
    *,
    current_user: User,
    status: ProjectStatus | str | None = None,
    country: str | None = None,
    pillar: str | None = None,
    submitted_by: UUID | None = None,
) -> list[Project]:
    """
    List projects visible to the caller.

    Privileged roles see every project; everyone else only sees their own
    submissions and may not ask for someone else's.

    Raises:
        PermissionDeniedError: If a non-privileged caller filters on another submitter
    """
    require(current_user.role, Operation.VIEW_OWN_PROJECTS)

    if not is_privileged(current_user.role):
        if submitted_by is not None and submitted_by != current_user.id:
            raise PermissionDeniedError()
        submitted_by = current_user.id

    return await projects_repo.list(
        session,
        status=_column_value(status),
        country=country,
        pillar=_column_value(pillar),
        submitted_by=submitted_by,
    )


async def list_my_projects(session: AsyncSession, *, current_user: User) -> list[Project]:
    """List the caller's own submissions, newest first."""
    require(current_user.role, Operation.VIEW_OWN_PROJECTS)
    return await projects_repo.list(session, submitted_by=current_user.id)


async def list_public_projects(session: AsyncSession) -> list[Project]:
    """List approved projects for anonymous visitors."""
    return await projects_repo.list_approved(session)


async def get_project(
    session: AsyncSession,
    *,
    current_user: User,
    project_id: UUID,
) -> Project:
    """
    Get a project by ID.

    Raises:
        NotFoundError: If the project does not exist or the caller may not see it
    """
    require(current_user.role, Operation.VIEW_OWN_PROJECTS)
    project = await _get_or_404(session, project_id)

    if not is_privileged(current_user.role) and project.submitted_by != current_user.id:
        raise NotFoundError("Project")

    return project


async def review_project(
    session: AsyncSession,
    *,
    current_user: User,
    project_id: UUID,
    strict: bool | None = None,
) -> Project:
    """
    Move a project to under_review and notify its submitter.

    Args:
        session: Database session
        current_user: Reviewing focal person or admin
        project_id: Project to review
        strict: Override STRICT_TRANSITIONS for this call

    Returns:
        Updated project

    Raises:
        PermissionDeniedError: If the caller may not review
        NotFoundError: If the project does not exist
        InvalidTransitionError: If the project is not in a reviewable status
    """
    require(current_user.role, Operation.REVIEW_PROJECT)
    project = await _get_or_404(session, project_id)
    previous = project.status

    check_transition(project.status, ProjectStatus.UNDER_REVIEW, strict=_strict(strict))

    project.status = ProjectStatus.UNDER_REVIEW.value
    project.reviewed_by = current_user.id
    project.reviewed_at = datetime.now(UTC)
    notifications_service.emit(
        session,
        project=project,
        notification_type=NotificationType.REVIEW,
    )
    await commit(session)
    await session.refresh(project)

    logger.info(
        "Project %s: %s -> under_review by %s",
        project.id,
        previous,
        current_user.id,
    )
    return project


async def decide_project(
    session: AsyncSession,
    *,
    current_user: User,
    project_id: UUID,
    approved: bool,
    strict: bool | None = None,
) -> Project:
    """
    Approve or reject a project and notify its submitter.

    Args:
        session: Database session
        current_user: Deciding approver or admin
        project_id: Project to decide on
        approved: True to approve, False to reject
        strict: Override STRICT_TRANSITIONS for this call

    Returns:
        Updated project

    Raises:
        PermissionDeniedError: If the caller may not approve/reject
        NotFoundError: If the project does not exist
        InvalidTransitionError: If the project is not awaiting a decision
    """
    require(current_user.role, Operation.APPROVE_REJECT_PROJECT)
    project = await _get_or_404(session, project_id)
    previous = project.status
    target = decision_status(approved)

    check_transition(project.status, target, strict=_strict(strict))

    project.status = target.value
    project.approved_by = current_user.id
    project.approved_at = datetime.now(UTC)
    notifications_service.emit(
        session,
        project=project,
        notification_type=NotificationType.APPROVAL if approved else NotificationType.REJECTION,
    )
    await commit(session)
    await session.refresh(project)

    logger.info(
        "Project %s: %s -> %s by %s",
        project.id,
        previous,
        target.value,
        current_user.id,
    )
    return project


async def update_project(
    session: AsyncSession,
    *,
    current_user: User,
    project_id: UUID,
    payload: ProjectUpdate,
) -> Project:
    """
    Administrator direct edit: overwrite any provided field, workflow fields
    included. The state machine is not consulted and nobody is notified.

    Raises:
        PermissionDeniedError: If the caller is not an administrator
        NotFoundError: If the project does not exist
        ValidationError: If a required field would become empty
    """
    require(current_user.role, Operation.MANAGE_PROJECTS)
    project = await _get_or_404(session, project_id)

    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if value is None and field in NON_NULLABLE_FIELDS:
            raise ValidationError(field, "This field cannot be empty")
        if field in REQUIRED_TEXT_FIELDS and not value.strip():
            raise ValidationError(field, "This field cannot be empty")
    if "country" in changes:
        await _validate_country(session, changes["country"])

    for field, value in changes.items():
        setattr(project, field, _column_value(value))
    project.updated_at = datetime.now(UTC)

    await commit(session)
    await session.refresh(project)

    logger.info(
        "Project %s edited by admin %s (fields: %s)",
        project.id,
        current_user.id,
        ", ".join(sorted(changes)) or "none",
    )
    return project


async def delete_project(
    session: AsyncSession,
    *,
    current_user: User,
    project_id: UUID,
) -> None:
    """
    Permanently delete a project (administrator only). No tombstone is kept.

    Raises:
        PermissionDeniedError: If the caller is not an administrator
        NotFoundError: If the project does not exist
    """
    require(current_user.role, Operation.MANAGE_PROJECTS)
    project = await _get_or_404(session, project_id)

    await projects_repo.delete(session, project)
    await commit(session)

    logger.info("Project %s deleted by admin %s", project_id, current_user.id)
