"""Notification model - a workflow event addressed to a user."""

import enum
from datetime import datetime, UTC
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class NotificationType(str, enum.Enum):
    """Kind of workflow event a notification reports."""

    SUBMISSION = "submission"
    REVIEW = "review"
    APPROVAL = "approval"
    REJECTION = "rejection"


class Notification(Base):
    """Notification ORM model.

    Rows are only created as a side effect of a workflow transition and only
    the ``read`` flag changes afterwards.
    """

    __tablename__ = "notifications"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    project_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )


# Pydantic schemas
class NotificationResponse(BaseModel):
    """Schema for notification response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    project_id: UUID
    type: NotificationType
    message: str
    read: bool
    created_at: datetime


class UnreadCountResponse(BaseModel):
    """Schema for the unread notification counter."""

    unread: int
