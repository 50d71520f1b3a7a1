"""Repository for Notification database operations."""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.notification import Notification


async def get_by_id(
    session: AsyncSession,
    *,
    user_id: UUID,
    notification_id: UUID,
) -> Notification | None:
    """
    Get a notification addressed to a user.

    Args:
        session: Database session
        user_id: Recipient to filter by
        notification_id: Notification ID to fetch

    Returns:
        Notification if found and addressed to user_id, None otherwise
    """
    result = await session.execute(
        select(Notification).where(
            Notification.id == notification_id,
            Notification.user_id == user_id,
        )
    )
    return result.scalar_one_or_none()


async def count_unread(session: AsyncSession, *, user_id: UUID) -> int:
    """Count unread notifications for a user."""
    result = await session.execute(
        select(func.count(Notification.id)).where(
            Notification.user_id == user_id,
            Notification.read.is_(False),
        )
    )
    return result.scalar_one()


async def mark_all_read(session: AsyncSession, *, user_id: UUID) -> int:
    """
    Flag every unread notification of a user as read.

    Returns:
        Number of notifications changed
    """
    result = await session.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.read.is_(False))
        .values(read=True)
    )
    return result.rowcount


def add(session: AsyncSession, notification: Notification) -> Notification:
    """
    Stage a notification in the session. The caller commits it together
    with the change that produced it.
    """
    session.add(notification)
    return notification


async def list(
    session: AsyncSession,
    *,
    user_id: UUID,
    unread_only: bool = False,
) -> list[Notification]:
    """
    List a user's notifications, newest first.

    Args:
        session: Database session
        user_id: Recipient to filter by
        unread_only: If True, skip notifications already read

    Returns:
        List of notifications
    """
    query = select(Notification).where(Notification.user_id == user_id)

    if unread_only:
        query = query.where(Notification.read.is_(False))

    query = query.order_by(Notification.created_at.desc())
    result = await session.execute(query)
    return [notification for notification in result.scalars().all()]
