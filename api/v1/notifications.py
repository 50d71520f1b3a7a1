"""Notification inbox endpoints for the calling user."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_db
from models.notification import NotificationResponse, UnreadCountResponse
from models.user import User
from services import notifications_service

router = APIRouter()


@router.get("/notifications", response_model=List[NotificationResponse])
async def list_notifications_endpoint(
    unread_only: bool = Query(False),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's notifications, newest first."""
    return await notifications_service.list_notifications(
        db,
        current_user=current_user,
        unread_only=unread_only,
    )


@router.get("/notifications/unread-count", response_model=UnreadCountResponse)
async def unread_count_endpoint(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Number of unread notifications."""
    unread = await notifications_service.unread_count(db, current_user=current_user)
    return UnreadCountResponse(unread=unread)


@router.post("/notifications/read-all", response_model=UnreadCountResponse)
async def mark_all_read_endpoint(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Mark every notification as read. Returns the new unread count (0)."""
    await notifications_service.mark_all_read(db, current_user=current_user)
    return UnreadCountResponse(unread=0)


@router.post("/notifications/{notification_id}/read", response_model=NotificationResponse)
async def mark_read_endpoint(
    notification_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Mark one notification as read.

    Raises:
        404 if the notification does not exist or is addressed to someone else.
    """
    return await notifications_service.mark_read(
        db,
        current_user=current_user,
        notification_id=notification_id,
    )
