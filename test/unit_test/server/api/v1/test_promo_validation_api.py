import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

VALIDATE_URL = "/api/v1/promo-codes/validate"


async def test_valid_percentage_code(anon_client: AsyncClient, catalogue):
    response = await anon_client.post(VALIDATE_URL, json={"code": "welcome10", "order_total": 298})

    assert response.status_code == 200
    assert response.json() == {
        "valid": True,
        "discount": {"code": "WELCOME10", "type": "percentage", "value": 10, "discount_amount": 29.8},
    }


async def test_valid_fixed_code(anon_client: AsyncClient, catalogue):
    response = await anon_client.post(VALIDATE_URL, json={"code": "SAVE50", "order_total": 349})

    assert response.json()["discount"]["discount_amount"] == 50


@pytest.mark.parametrize(
    "code,total,error",
    [
        ("NOPE", 300, "Invalid promo code"),
        ("PAUSED", 300, "This promo code is no longer active"),
        ("EXPIRED5", 300, "This promo code has expired"),
        ("USEDUP", 300, "This promo code has reached its usage limit"),
        ("SAVE50", 199, "Minimum order amount of $200 required"),
    ],
)
async def test_rejected_codes_are_not_errors(anon_client: AsyncClient, catalogue, code, total, error):
    response = await anon_client.post(VALIDATE_URL, json={"code": code, "order_total": total})

    assert response.status_code == 200
    assert response.json() == {"valid": False, "error": error}


@pytest.mark.parametrize("body", [{"order_total": 100}, {"code": "   ", "order_total": 100}])
async def test_code_is_required(anon_client: AsyncClient, catalogue, body):
    response = await anon_client.post(VALIDATE_URL, json=body)

    assert response.status_code == 400
    assert response.json() == {"detail": "Promo code is required"}


@pytest.mark.parametrize("total", [None, 0, -5])
async def test_order_total_must_be_positive(anon_client: AsyncClient, catalogue, total):
    response = await anon_client.post(VALIDATE_URL, json={"code": "WELCOME10", "order_total": total})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid order total"}


async def test_validation_does_not_redeem(anon_client: AsyncClient, catalogue, session_factory):
    from fivimedia_llc.core.database.repositories import build_sql_repos_from_session

    await anon_client.post(VALIDATE_URL, json={"code": "WELCOME10", "order_total": 298})

    async with session_factory() as session:
        promo = await build_sql_repos_from_session(session=session).promo_codes.get_by_code("WELCOME10")
    assert promo.used_count == 0
