"""Unit tests for user listing and role management."""

from uuid import uuid4

import pytest

from models.user import Role
from services.errors import NotFoundError, PermissionDeniedError
from services.users_service import list_users, update_user_role


@pytest.mark.asyncio
async def test_admin_lists_users_with_role_filter(db_session, admin_user, public_user, focal_user):
    everyone = await list_users(db_session, current_user=admin_user)
    focal = await list_users(db_session, current_user=admin_user, role=Role.FOCAL_PERSON)

    assert {u.id for u in everyone} == {admin_user.id, public_user.id, focal_user.id}
    assert [u.id for u in focal] == [focal_user.id]


@pytest.mark.asyncio
async def test_list_users_is_admin_only(db_session, focal_user):
    with pytest.raises(PermissionDeniedError):
        await list_users(db_session, current_user=focal_user)


@pytest.mark.asyncio
async def test_admin_changes_role(db_session, admin_user, public_user):
    user = await update_user_role(
        db_session,
        current_user=admin_user,
        user_id=public_user.id,
        role=Role.APPROVER,
    )
    assert user.role == "approver"


@pytest.mark.asyncio
async def test_change_role_of_unknown_user(db_session, admin_user):
    with pytest.raises(NotFoundError):
        await update_user_role(db_session, current_user=admin_user, user_id=uuid4(), role=Role.ADMIN)


@pytest.mark.asyncio
async def test_change_role_is_admin_only(db_session, approver_user, public_user):
    with pytest.raises(PermissionDeniedError):
        await update_user_role(
            db_session,
            current_user=approver_user,
            user_id=public_user.id,
            role=Role.ADMIN,
        )
