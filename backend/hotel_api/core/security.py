"""
JWT issuing and the authenticated-user dependency.

A request is authenticated when it carries `Authorization: Bearer <token>`,
the token verifies against SECRET_KEY, and a session row holds that exact
token. Anything else is a 401.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.config import Settings, get_settings
from hotel_api.core.errors import UnauthorizedError
from hotel_api.core.logging import get_logger
from hotel_api.db.session import get_db
from hotel_api.repositories import session_repository

logger = get_logger(__name__)

# auto_error=False: a missing header must be 401, not FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    data: dict,
    settings: Optional[Settings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    settings = settings or get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload = {**data, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_user_id(token: str, settings: Settings) -> int:
    """User id from the `sub` claim. Raises UnauthorizedError on any defect."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.info("token_rejected", reason=type(exc).__name__)
        raise UnauthorizedError() from exc

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        logger.info("token_rejected", reason="bad_subject")
        raise UnauthorizedError()


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> int:
    if credentials is None:
        raise UnauthorizedError()

    token = credentials.credentials
    user_id = decode_user_id(token, settings)

    session = await session_repository.find_session_by_token(db, token)
    if session is None or session.user_id != user_id:
        logger.info("token_rejected", reason="no_session", user_id=user_id)
        raise UnauthorizedError()

    return user_id
