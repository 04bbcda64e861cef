import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_states_recommended_first(anon_client: AsyncClient, catalogue):
    response = await anon_client.get("/api/v1/states")

    assert response.status_code == 200
    codes = [s["code"] for s in response.json()]
    # California is inactive
    assert codes == ["WY", "DE"]


async def test_active_languages(anon_client: AsyncClient, languages):
    response = await anon_client.get("/api/v1/languages")

    assert response.status_code == 200
    assert response.json() == [
        {"code": "en", "name": "English", "direction": "ltr", "is_default": True},
        {"code": "ar", "name": "العربية", "direction": "rtl", "is_default": False},
    ]


async def test_faqs_default_to_english(anon_client: AsyncClient, faq_content):
    response = await anon_client.get("/api/v1/faqs")

    assert response.status_code == 200
    data = response.json()
    assert [c["key"] for c in data] == ["general", "pricing"]
    assert data[0]["faqs"][0]["question"] == "What is an LLC?"


async def test_faqs_in_arabic(anon_client: AsyncClient, faq_content):
    response = await anon_client.get("/api/v1/faqs", params={"locale": "ar"})

    general = response.json()[0]
    assert general["name"] == "الأسئلة العامة"
    assert general["faqs"][0]["answer"] == "هيكل تجاري."
