"""
Admin authentication.

Passwords are hashed with bcrypt through passlib. A successful login issues
a signed JWT that is stored in an HTTP-only cookie; every admin endpoint
depends on ``get_current_user`` to resolve it back to a user.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request, Response, status
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from fivimedia_llc.core.database import get_session
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.server.core.config import settings

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed hash stored for the user
        return False


def create_session_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed session token for an admin user."""
    auth = settings.auth
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=auth.expiration_hours))
    claims = {"sub": str(user.id), "email": user.email, "role": user.role, "exp": expire}
    return jwt.encode(claims, auth.secret_key, algorithm=auth.algorithm)


def decode_session_token(token: str) -> Optional[Dict]:
    """Decode and validate a session token, returning None when it is invalid or expired."""
    auth = settings.auth
    try:
        return jwt.decode(token, auth.secret_key, algorithms=[auth.algorithm])
    except JWTError:
        return None


def set_session_cookie(response: Response, token: str) -> None:
    auth = settings.auth
    response.set_cookie(
        key=auth.cookie_name,
        value=token,
        max_age=auth.expiration_hours * 3600,
        httponly=True,
        secure=auth.cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.auth.cookie_name)


async def get_current_user(request: Request, session: AsyncSession = Depends(get_session)) -> User:
    """
    Resolve the admin user from the session cookie.

    Raises:
        HTTPException: 401 when the cookie is missing, invalid, expired or
            refers to a user that no longer exists
    """
    unauthorized = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        raise unauthorized

    claims = decode_session_token(token)
    if not claims or not str(claims.get("sub", "")).isdigit():
        raise unauthorized

    user = await session.get(User, int(claims["sub"]))
    if user is None:
        logger.info(f"Session token refers to missing user id={claims['sub']}")
        raise unauthorized
    return user
