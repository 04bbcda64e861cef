"""
Admin user management endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity, UserRole
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.users import UserCreate, UserRead, UserUpdate
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import MIN_PASSWORD_LENGTH, get_current_user, hash_password

logger = get_logger(__name__)

router = APIRouter(tags=["admin-users"])

_PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def _get_or_404(repos: SqlRepoBundle, user_id: int) -> User:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=List[UserRead], summary="List Users")
async def list_users(repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)) -> List[UserRead]:
    """All admin users, newest first."""
    return [UserRead.model_validate(u) for u in await repos.users.list_newest_first()]


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    responses={400: {"description": "Missing fields, short password or duplicate email"}},
)
async def create_user(
    payload: UserCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    current: User = Depends(get_current_user),
) -> UserRead:
    """
    Create an admin user.

    - **email**: Login email, unique.
    - **password**: At least six characters.
    - **name**: Optional display name.
    """
    if not payload.email or not payload.email.strip() or not payload.password:
        raise _bad_request("Email and password are required")
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise _bad_request(_PASSWORD_TOO_SHORT)

    email = payload.email.strip().lower()
    if await repos.users.get_by_email(email) is not None:
        raise _bad_request("Email already exists")

    user = await repos.users.create(
        User(
            email=email,
            password_hash=hash_password(payload.password),
            name=payload.name or None,
            role=UserRole.admin.value,
        )
    )
    logger.info(f"User {user.email} created by {current.email}")
    await audit.log(current, AuditAction.create, AuditEntity.user, user.id, {"email": {"from": None, "to": user.email}})
    return UserRead.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update User",
    responses={
        400: {"description": "Password too short"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    current: User = Depends(get_current_user),
) -> UserRead:
    """
    Update a user's name and optionally set a new password.

    An empty password leaves the current one unchanged.
    """
    user = await _get_or_404(repos, user_id)
    changes = {}

    if payload.password:
        if len(payload.password) < MIN_PASSWORD_LENGTH:
            raise _bad_request(_PASSWORD_TOO_SHORT)
        user.password_hash = hash_password(payload.password)
        changes["password"] = {"from": None, "to": "changed"}

    if "name" in payload.model_fields_set and (payload.name or None) != user.name:
        changes["name"] = {"from": user.name, "to": payload.name or None}
        user.name = payload.name or None

    user = await repos.users.update(user)
    await audit.log(current, AuditAction.update, AuditEntity.user, user.id, changes or None)
    return UserRead.model_validate(user)


@router.delete(
    "/{user_id}",
    response_model=SuccessResponse,
    summary="Delete User",
    responses={
        400: {"description": "Deleting yourself or the last admin"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: int,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    current: User = Depends(get_current_user),
) -> SuccessResponse:
    """Delete a user. You cannot delete yourself or the last admin."""
    if user_id == current.id:
        raise _bad_request("You cannot delete your own account")

    user = await _get_or_404(repos, user_id)
    if user.role == UserRole.admin.value and await repos.users.count_by_role(UserRole.admin.value) <= 1:
        raise _bad_request("Cannot delete the last admin user")

    await repos.users.delete(user.id)
    await audit.log(current, AuditAction.delete, AuditEntity.user, user_id, {"email": {"from": user.email, "to": None}})
    return SuccessResponse()
