"""Service layer for workflow notifications."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from db import commit
from models.notification import Notification, NotificationType
from models.project import Project
from models.user import User
from repos import notifications_repo
from services.errors import NotFoundError

logger = logging.getLogger(__name__)

MESSAGES: dict[NotificationType, str] = {
    NotificationType.SUBMISSION: (
        'Your project "{title}" has been submitted and is awaiting review.'
    ),
    NotificationType.REVIEW: (
        'Your project "{title}" has been reviewed by a focal person and is now under review.'
    ),
    NotificationType.APPROVAL: 'Your project "{title}" has been approved.',
    NotificationType.REJECTION: 'Your project "{title}" has been rejected.',
}


def emit(
    session: AsyncSession,
    *,
    project: Project,
    notification_type: NotificationType,
) -> Notification:
    """
    Stage a notification to the project's submitter.

    The row is added to the session but not committed: it is written in the
    same transaction as the status change that produced it.

    Args:
        session: Database session carrying the transition
        project: Project the event is about
        notification_type: Kind of event

    Returns:
        The staged notification
    """
    notification = Notification(
        user_id=project.submitted_by,
        project_id=project.id,
        type=notification_type.value,
        message=MESSAGES[notification_type].format(title=project.project_title),
        read=False,
    )
    notifications_repo.add(session, notification)
    logger.debug(
        "Queued %s notification for user %s (project %s)",
        notification_type.value,
        project.submitted_by,
        project.id,
    )
    return notification


async def list_notifications(
    session: AsyncSession,
    *,
    current_user: User,
    unread_only: bool = False,
) -> list[Notification]:
    """
    List the caller's own notifications, newest first.
    """
    return await notifications_repo.list(
        session,
        user_id=current_user.id,
        unread_only=unread_only,
    )


async def unread_count(session: AsyncSession, *, current_user: User) -> int:
    """Count the caller's unread notifications."""
    return await notifications_repo.count_unread(session, user_id=current_user.id)


async def mark_read(
    session: AsyncSession,
    *,
    current_user: User,
    notification_id: UUID,
) -> Notification:
    """
    Flag one of the caller's notifications as read.

    Raises:
        NotFoundError: If the notification does not exist or belongs to someone else
    """
    notification = await notifications_repo.get_by_id(
        session,
        user_id=current_user.id,
        notification_id=notification_id,
    )
    if not notification:
        raise NotFoundError("Notification")

    if not notification.read:
        notification.read = True
        await commit(session)
        await session.refresh(notification)

    return notification


async def mark_all_read(session: AsyncSession, *, current_user: User) -> int:
    """
    Flag all of the caller's notifications as read.

    Returns:
        Number of notifications changed
    """
    changed = await notifications_repo.mark_all_read(session, user_id=current_user.id)
    await commit(session)
    return changed
