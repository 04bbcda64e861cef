"""
Admin authentication endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.users import LoginRequest, UserRead
from fivimedia_llc.server.services.auth import (
    clear_session_cookie,
    create_session_token,
    get_current_user,
    set_session_cookie,
    verify_password,
)

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=UserRead,
    summary="Sign In",
    description="Check admin credentials and set the session cookie.",
    responses={
        200: {"description": "Signed in"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(credentials: LoginRequest, response: Response, repos: SqlRepoBundle = Depends(get_repos)) -> UserRead:
    """
    Sign in to the back office.

    On success an HTTP-only session cookie is set on the response.
    """
    user = await repos.users.get_by_email(credentials.email.strip().lower())
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login attempt for {credentials.email!r}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    set_session_cookie(response, create_session_token(user))
    logger.info(f"User {user.email} signed in")
    return UserRead.model_validate(user)


@router.post("/logout", response_model=SuccessResponse, summary="Sign Out")
async def logout(response: Response) -> SuccessResponse:
    """Clear the session cookie."""
    clear_session_cookie(response)
    return SuccessResponse()


@router.get("/me", response_model=UserRead, summary="Current User")
async def me(user: User = Depends(get_current_user)) -> UserRead:
    """Return the signed-in admin."""
    return UserRead.model_validate(user)
