"""Service layer for users and role management."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from auth.permissions import Operation, require
from db import commit
from models.user import Role, User
from repos import users_repo
from services.errors import NotFoundError

logger = logging.getLogger(__name__)


async def list_users(
    session: AsyncSession,
    *,
    current_user: User,
    role: Role | None = None,
) -> list[User]:
    """
    List users (administrator only), optionally only those holding one role.
    """
    require(current_user.role, Operation.MANAGE_USERS)
    return await users_repo.list(session, role=role.value if role else None)


async def update_user_role(
    session: AsyncSession,
    *,
    current_user: User,
    user_id: UUID,
    role: Role,
) -> User:
    """
    Change a user's role (administrator only).

    Raises:
        PermissionDeniedError: If the caller may not manage users
        NotFoundError: If the user does not exist
    """
    require(current_user.role, Operation.MANAGE_USERS)

    user = await users_repo.get_by_id(session, user_id=user_id)
    if not user:
        raise NotFoundError("User")

    previous = user.role
    user.role = role.value
    await commit(session)
    await session.refresh(user)

    logger.info("User %s role changed %s -> %s by %s", user.id, previous, role.value, current_user.id)
    return user
