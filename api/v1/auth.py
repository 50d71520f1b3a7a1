"""Authentication endpoints (DEV-ONLY).

Real sign-in is handled by an external identity provider; this endpoint only
exists so the portal can be exercised locally.
"""

from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

import config
from api.deps import get_db
from auth.jwt import create_access_token
from db import commit
from models.user import Role, User
from repos import users_repo

router = APIRouter()

# Landing page per role after login
NEXT_URLS: dict[str, str] = {
    Role.PUBLIC.value: "/my-submissions",
    Role.FOCAL_PERSON.value: "/focal-person",
    Role.APPROVER.value: "/approver",
    Role.ADMIN.value: "/admin",
}


class DevLoginRequest(BaseModel):
    """Request schema for dev login."""

    email: EmailStr
    name: str | None = None
    role: Role | None = None  # Only honoured outside production


class DevLoginResponse(BaseModel):
    """Response schema for dev login."""

    access_token: str
    token_type: str = "bearer"
    user_id: str
    role: str
    next_url: str  # Next URL to navigate to after login


@router.post("/auth/dev-login", response_model=DevLoginResponse)
async def dev_login(
    request: DevLoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    DEV-ONLY endpoint to login user and return JWT token.

    This endpoint:
    - Finds or creates a user by email (new users default to the public role)
    - Applies the requested role if one is given
    - Returns a signed JWT with user_id and role

    Args:
        request: Login request with email, optional name and role
        db: Database session

    Returns:
        DevLoginResponse: JWT token and user information
    """
    # Check if dev environment
    if config.settings.APP_ENV == "production":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Dev login is not available in production",
        )

    email_lower = request.email.lower()
    user = await users_repo.get_by_email(db, email=email_lower)

    if not user:
        user_name = request.name or email_lower.split("@")[0].replace(".", " ").title()
        user = await users_repo.create(
            db,
            User(
                id=uuid4(),
                email=email_lower,
                name=user_name,
                role=(request.role or Role.PUBLIC).value,
                is_active=True,
            ),
        )
    elif request.role and user.role != request.role.value:
        # Update role if provided and different
        user.role = request.role.value

    await commit(db)

    access_token = create_access_token(user_id=user.id, role=user.role)

    return DevLoginResponse(
        access_token=access_token,
        user_id=str(user.id),
        role=user.role,
        next_url=NEXT_URLS.get(user.role, "/"),
    )
