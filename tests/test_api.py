import httpx
import pytest
from httpx import AsyncClient
from respx import MockRouter

from triggerlines.core.config import GEMINI_ENDPOINT, OPENAI_ENDPOINT

MISSING = {"error": "Missing triggerWord in request body"}


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def openai_reply(text: str) -> dict:
    return {"choices": [{"message": {"content": text}}]}


@pytest.mark.asyncio
async def test_health_reports_providers(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "OK",
        "providers": {"gemini": True, "openai": True},
        "defaultProvider": "gemini",
    }


@pytest.mark.asyncio
async def test_generate_success(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.post(url__startswith=GEMINI_ENDPOINT).mock(
        return_value=httpx.Response(200, json=gemini_reply("FIRE AND ICE!"))
    )

    response = await client.post("/api/generate", json={"triggerWord": "Fire"})

    assert response.status_code == 200
    assert response.json() == {"message": "FIRE AND ICE!", "triggerWord": "Fire", "provider": "gemini"}


@pytest.mark.asyncio
async def test_generate_reports_provider_actually_used(client_for, gemini_only_settings, respx_mock: MockRouter):
    respx_mock.post(url__startswith=GEMINI_ENDPOINT).mock(
        return_value=httpx.Response(200, json=gemini_reply("KEEP GOING"))
    )

    async with client_for(gemini_only_settings) as client:
        response = await client.post("/api/generate", json={"triggerWord": "STORM", "provider": "openai"})

    assert response.status_code == 200
    assert response.json()["provider"] == "gemini"


@pytest.mark.asyncio
async def test_generate_with_requested_openai(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.post(OPENAI_ENDPOINT).mock(return_value=httpx.Response(200, json=openai_reply("WIN")))

    response = await client.post("/api/generate", json={"triggerWord": "VICTORY", "provider": "openai"})

    assert response.status_code == 200
    assert response.json()["provider"] == "openai"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {}},
        {"json": {"triggerWord": ""}},
        {"json": {"triggerWord": None}},
        {"json": {"triggerWord": 7}},
        {"json": ["FIRE"]},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        {},
    ],
)
async def test_generate_rejects_bad_body(client: AsyncClient, respx_mock: MockRouter, kwargs):
    response = await client.post("/api/generate", **kwargs)

    assert response.status_code == 400
    assert response.json() == MISSING
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_no_providers(client_for, no_key_settings, respx_mock: MockRouter):
    async with client_for(no_key_settings) as client:
        health = await client.get("/api/health")
        response = await client.post("/api/generate", json={"triggerWord": "FIRE"})

    assert health.json()["providers"] == {"gemini": False, "openai": False}
    assert response.status_code == 500
    assert "No API providers available" in response.json()["error"]
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_malformed_gemini_response_returns_500(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.post(url__startswith=GEMINI_ENDPOINT).mock(return_value=httpx.Response(200, json={}))

    response = await client.post("/api/generate", json={"triggerWord": "FIRE"})

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid response from Gemini API"}


@pytest.mark.asyncio
async def test_upstream_error_status_is_relayed_as_500(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.post(OPENAI_ENDPOINT).mock(return_value=httpx.Response(401, text='{"error":"bad key"}'))

    response = await client.post("/api/generate", json={"triggerWord": "FIRE", "provider": "openai"})

    assert response.status_code == 500
    assert response.json() == {"error": 'OpenAI API error: 401 - {"error":"bad key"}'}


@pytest.mark.asyncio
async def test_unexpected_error_is_generic_500(client_for, settings, monkeypatch):
    async def boom(self, trigger_word, provider=None):
        raise RuntimeError("kaput")

    monkeypatch.setattr("triggerlines.services.llm_service.ProviderGateway.generate", boom)

    async with client_for(settings, raise_app_exceptions=False) as client:
        response = await client.post("/api/generate", json={"triggerWord": "FIRE"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_root_serves_presentation_page(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert 'id="messageContent"' in response.text
    assert "/static/script.js" in response.text


@pytest.mark.asyncio
async def test_static_script_is_served(client: AsyncClient):
    response = await client.get("/static/script.js")

    assert response.status_code == 200
    assert "renderTokens" in response.text


@pytest.mark.asyncio
async def test_whitespace_trigger_word_is_accepted(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.post(url__startswith=GEMINI_ENDPOINT).mock(
        return_value=httpx.Response(200, json=gemini_reply("STAND"))
    )

    response = await client.post("/api/generate", json={"triggerWord": "   "})

    assert response.status_code == 200
    assert response.json()["triggerWord"] == "   "


@pytest.mark.asyncio
async def test_generate_documents_error_body(client: AsyncClient):
    response = await client.get("/openapi.json")

    responses = response.json()["paths"]["/api/generate"]["post"]["responses"]
    for status in ("400", "500"):
        assert responses[status]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
