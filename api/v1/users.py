"""User endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_db
from models.user import Role, User, UserResponse, UserRoleUpdate
from services.users_service import list_users, update_user_role

router = APIRouter()


@router.get("/users/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """
    The authenticated user's profile, including their role.
    """
    return current_user


@router.get("/users", response_model=List[UserResponse])
async def list_users_endpoint(
    role: Role | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List users (admin only).

    Returns:
        List of users ordered by email.
    """
    return await list_users(db, current_user=current_user, role=role)


@router.patch("/users/{user_id}/role", response_model=UserResponse)
async def update_user_role_endpoint(
    user_id: UUID,
    role_data: UserRoleUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Change a user's role (admin only).

    Tokens issued for the old role stop working; the user has to sign in again.
    """
    return await update_user_role(
        db,
        current_user=current_user,
        user_id=user_id,
        role=role_data.role,
    )
