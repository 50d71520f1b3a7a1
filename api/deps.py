"""FastAPI dependencies for authentication and database."""

from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import decode_token
from db import get_db as get_db_session
from models.user import User
from repos import users_repo

# HTTP Bearer token security scheme. auto_error is off so public endpoints can
# accept anonymous callers; get_current_user turns a missing token into 401.
security = HTTPBearer(auto_error=False)


async def get_db() -> AsyncSession:
    """
    Dependency to get database session.
    Reuses the get_db function from db.py.
    """
    async for session in get_db_session():
        yield session


async def _resolve_user(token: str, db: AsyncSession) -> User:
    try:
        token_payload = decode_token(token)
        user_id = UUID(token_payload.sub)
    except (JWTError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    user = await users_repo.get_by_id(db, user_id=user_id)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive",
        )

    # Role changes take effect immediately: a token issued for an older role is refused
    if user.role != token_payload.role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token role does not match user role",
        )

    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token from Authorization header
        db: Database session

    Returns:
        User: The authenticated user

    Raises:
        HTTPException: If token is missing, invalid, expired or the user is unknown
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return await _resolve_user(credentials.credentials, db)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User | None:
    """
    Dependency for endpoints open to anonymous callers.

    Returns:
        The authenticated user, or None when no token was sent. A token that
        is sent but invalid is still rejected.
    """
    if credentials is None:
        return None
    return await _resolve_user(credentials.credentials, db)
