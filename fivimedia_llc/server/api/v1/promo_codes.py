"""
Promo code validation endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.base import utc_now_naive
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.promo_codes import PromoDiscount, PromoValidateRequest, PromoValidateResponse
from fivimedia_llc.server.services.pricing import evaluate_promo_code

router = APIRouter(tags=["promo-codes"])


@router.post(
    "/validate",
    response_model=PromoValidateResponse,
    response_model_exclude_none=True,
    summary="Validate Promo Code",
    description="Check whether a promo code applies to an order total and compute its discount.",
    responses={
        200: {"description": "Validation outcome, see `valid`"},
        400: {"description": "Missing code or invalid order total"},
    },
)
async def validate_promo_code(
    request: PromoValidateRequest, repos: SqlRepoBundle = Depends(get_repos)
) -> PromoValidateResponse:
    """
    Validate a promo code.

    A code that cannot be applied is not an error: the response carries
    ``valid: false`` and the reason in ``error``.

    - **code**: The promo code, case-insensitive.
    - **order_total**: Order total before discount, must be positive.
    """
    if not request.code or not request.code.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Promo code is required")
    if request.order_total is None or request.order_total <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid order total")

    promo = await repos.promo_codes.get_by_code(request.code)
    evaluation = evaluate_promo_code(promo, request.order_total, utc_now_naive())
    if not evaluation.valid:
        return PromoValidateResponse(valid=False, error=evaluation.error)

    return PromoValidateResponse(
        valid=True,
        discount=PromoDiscount(
            code=promo.code,
            type=promo.type,
            value=promo.value,
            discount_amount=evaluation.discount_amount,
        ),
    )
