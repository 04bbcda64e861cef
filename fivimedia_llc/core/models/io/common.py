"""
Shared pieces of the API I/O schemas.

Validators here raise ``ValueError`` with the exact message reported to the
client as the ``detail`` of a 400 response.
"""

from __future__ import annotations

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel


def require_text(value: Any, message: str) -> str:
    """Reject missing or blank strings with ``message``."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value


def require_email(value: Any, message: str = "Invalid email address") -> str:
    """Validate an email address syntactically and return it normalized."""
    if not isinstance(value, str):
        raise ValueError(message)
    try:
        return validate_email(value.strip(), check_deliverability=False).normalized
    except EmailNotValidError as exc:
        raise ValueError(message) from exc


class Pagination(BaseModel):
    """Pagination block of a paged listing."""

    page: int
    limit: int
    total_count: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total_count: int) -> "Pagination":
        total_pages = (total_count + limit - 1) // limit if limit else 0
        return cls(page=page, limit=limit, total_count=total_count, total_pages=total_pages)


class SuccessResponse(BaseModel):
    """Acknowledgement of a mutation without a payload."""

    success: bool = True
