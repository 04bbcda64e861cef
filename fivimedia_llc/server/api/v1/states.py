"""
Public state listing.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.catalogue import StateRead

router = APIRouter(tags=["states"])


@router.get(
    "",
    response_model=List[StateRead],
    summary="List States",
    description="Active formation states, recommended states first, then alphabetically.",
)
async def list_states(repos: SqlRepoBundle = Depends(get_repos)) -> List[StateRead]:
    """List the states a customer can choose in the wizard."""
    return [StateRead.model_validate(s) for s in await repos.states.list_active()]
