"""JWT token creation and validation."""

from datetime import datetime, timedelta, UTC
from uuid import UUID

from jose import jwt, JWTError

import config
from auth.schemas import TokenPayload


def create_access_token(
    user_id: UUID,
    role: str,
    expires_in_hours: int | None = None,
) -> str:
    """
    Create a signed JWT for a user.

    Args:
        user_id: User UUID
        role: User role, checked against the database on every request
        expires_in_hours: Token expiration in hours (default: JWT_EXPIRES_HOURS)

    Returns:
        Encoded JWT token string
    """
    if expires_in_hours is None:
        expires_in_hours = config.settings.JWT_EXPIRES_HOURS
    exp = datetime.now(UTC) + timedelta(hours=expires_in_hours)

    payload = {
        "sub": str(user_id),
        "role": role,
        "exp": int(exp.timestamp()),  # JWT expects Unix timestamp
    }

    return jwt.encode(
        payload,
        config.settings.JWT_SECRET,
        algorithm=config.settings.JWT_ALGORITHM,
    )


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string

    Returns:
        TokenPayload with decoded claims

    Raises:
        JWTError: If token is invalid, expired or missing claims
    """
    try:
        payload = jwt.decode(
            token,
            config.settings.JWT_SECRET,
            algorithms=[config.settings.JWT_ALGORITHM],
        )

        return TokenPayload(
            sub=payload["sub"],
            role=payload["role"],
            exp=datetime.fromtimestamp(payload["exp"], UTC),
        )
    except (JWTError, KeyError) as e:
        raise JWTError(f"Invalid token: {str(e)}") from e
