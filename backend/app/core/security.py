"""
Bearer-token authentication for protected routes.

Tokens are HS256 JWTs carrying the user id under `userId`. A token is only
accepted while a session row still holds it, so logging out elsewhere
revokes it here.
"""

from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db.session import get_db
from app.models.user import Session

logger = get_logger(__name__)
settings = get_settings()

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict) -> str:
    return jwt.encode(data, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="You must be signed in to continue",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    if credentials is None:
        raise _unauthorized()

    token = credentials.credentials
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        user_id = int(payload["userId"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError):
        logger.warning("auth_failed", reason="invalid_token")
        raise _unauthorized()

    result = await db.execute(select(Session.id).where(Session.token == token).limit(1))
    if result.scalar_one_or_none() is None:
        logger.warning("auth_failed", reason="no_session", user_id=user_id)
        raise _unauthorized()

    return user_id
