"""
Coverage endpoint.

Lists the services included in a state's base price, in one language.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.catalogue import CoverageResponse
from fivimedia_llc.server.services.localization import DEFAULT_LOCALE, localize_coverage

router = APIRouter(tags=["coverage"])


@router.get(
    "",
    response_model=CoverageResponse,
    summary="Get State Coverage",
    description="List the coverage items included in a state's base formation price.",
    responses={
        200: {"description": "Coverage found"},
        400: {"description": "State code is missing"},
        404: {"description": "State not found"},
    },
)
async def get_coverage(
    state_code: Optional[str] = None,
    locale: str = DEFAULT_LOCALE,
    repos: SqlRepoBundle = Depends(get_repos),
) -> CoverageResponse:
    """
    Get the coverage of a state.

    - **state_code**: Two-letter state code, case-insensitive.
    - **locale**: ``ar`` for Arabic text, anything else for English.
    """
    if not state_code or not state_code.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="State code is required")

    state = await repos.states.get_by_code(state_code.strip())
    if state is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="State not found")

    rows = await repos.state_coverage.list_enabled_for_state(state.id)
    return CoverageResponse(
        state_code=state.code,
        state_name=state.name,
        base_price=state.base_price,
        coverage=[localize_coverage(row, item, locale) for row, item in rows],
    )
