"""
Checkout endpoint.

Places an order from the wizard. Prices and discounts are recomputed on the
server from the database.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.orders import OrderCreate, OrderCreated
from fivimedia_llc.server.services.orders import OrderService

router = APIRouter(tags=["orders"])


@router.post(
    "",
    response_model=OrderCreated,
    status_code=status.HTTP_200_OK,
    summary="Place Order",
    description="Create an LLC formation order. The total is computed server-side; an inapplicable promo code is ignored.",
    response_description="The display order id shown to the customer.",
    responses={
        200: {"description": "Order created"},
        400: {"description": "Invalid input or unknown state"},
    },
)
async def create_order(payload: OrderCreate, repos: SqlRepoBundle = Depends(get_repos)) -> OrderCreated:
    """
    Place an order.

    - **state_code**: Two-letter state code.
    - **add_on_slugs**: Selected add-on slugs.
    - **customer_info**: Full name, email, phone, country, business name and optional notes.
    - **promo_code**: Optional promo code. Applied only when valid for the order total.
    """
    order = await OrderService(repos).create_order(payload)
    return OrderCreated(order_id=order.display_id)
