"""Repository for Project database operations."""

from uuid import UUID

from sqlalchemy import delete as sa_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.notification import Notification
from models.project import Project, ProjectStatus


async def get_by_id(session: AsyncSession, *, project_id: UUID) -> Project | None:
    """
    Get a project by ID.

    Args:
        session: Database session
        project_id: Project ID to fetch

    Returns:
        Project if found, None otherwise
    """
    result = await session.execute(select(Project).where(Project.id == project_id))
    return result.scalar_one_or_none()


async def list_approved(session: AsyncSession) -> list[Project]:
    """
    List approved projects, most recently approved first.
    """
    query = (
        select(Project)
        .where(Project.status == ProjectStatus.APPROVED.value)
        .order_by(Project.approved_at.desc())
    )
    result = await session.execute(query)
    return [project for project in result.scalars().all()]


async def list(
    session: AsyncSession,
    *,
    status: str | None = None,
    country: str | None = None,
    pillar: str | None = None,
    submitted_by: UUID | None = None,
) -> list[Project]:
    """
    List projects, newest first, narrowed by any filters given.

    Args:
        session: Database session
        status: Only projects in this status
        country: Only projects for this country name
        pillar: Only projects in this pillar
        submitted_by: Only projects submitted by this user

    Returns:
        List of projects
    """
    query = select(Project)

    if status:
        query = query.where(Project.status == status)
    if country:
        query = query.where(Project.country == country)
    if pillar:
        query = query.where(Project.pifah_pillar == pillar)
    if submitted_by:
        query = query.where(Project.submitted_by == submitted_by)

    query = query.order_by(Project.created_at.desc())
    result = await session.execute(query)
    return [project for project in result.scalars().all()]


async def create(session: AsyncSession, project: Project) -> Project:
    """
    Create a new project.

    Args:
        session: Database session
        project: Project instance to create

    Returns:
        Created project
    """
    session.add(project)
    await session.flush()
    await session.refresh(project)
    return project


async def delete(session: AsyncSession, project: Project) -> None:
    """
    Permanently delete a project. Its notifications go with it.
    """
    await session.execute(sa_delete(Notification).where(Notification.project_id == project.id))
    await session.delete(project)
    await session.flush()
