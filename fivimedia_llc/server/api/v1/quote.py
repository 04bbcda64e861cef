"""
Quote endpoint.

Prices a state and add-on selection for the order wizard. The server is the
only source of truth for prices; the client displays what this returns.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.io.catalogue import QuoteRequest, QuoteResponse
from fivimedia_llc.server.services.localization import localize_add_on
from fivimedia_llc.server.services.pricing import calculate_quote

logger = get_logger(__name__)

router = APIRouter(tags=["quote"])


@router.post(
    "",
    response_model=QuoteResponse,
    summary="Get Quote",
    description="Compute the price of forming an LLC in a state with a selection of add-ons.",
    response_description="Price breakdown with selected and available add-ons.",
    responses={
        200: {"description": "Quote computed"},
        400: {"description": "Invalid request"},
        404: {"description": "State not found"},
    },
)
async def get_quote(request: QuoteRequest, repos: SqlRepoBundle = Depends(get_repos)) -> QuoteResponse:
    """
    Compute a quote.

    - **state_code**: Two-letter state code.
    - **add_on_slugs**: Slugs of the add-ons the customer selected. Unknown or inactive slugs are ignored.
    - **locale**: Language of add-on names (``en`` or ``ar``).
    """
    state = await repos.states.get_by_code(request.state_code)
    if state is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="State not found")

    available = await repos.add_ons.list_active()
    quote = calculate_quote(state, available, request.add_on_slugs)
    return QuoteResponse(
        state_code=state.code,
        state_name=state.name,
        base_price=quote.base_price,
        selected_add_ons=[localize_add_on(a, request.locale) for a in quote.selected_add_ons],
        available_add_ons=[localize_add_on(a, request.locale) for a in available],
        add_on_total=quote.add_on_total,
        total=quote.subtotal,
    )
