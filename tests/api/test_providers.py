from ratecard_backend.api.deps import get_provider_registry
from ratecard_backend.boundary.llm.provider_registry import ProviderRegistry
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider


def test_lists_configured_providers(client, auth_headers, reasoning_client, structured_client):
    registry = ProviderRegistry({
        ExtractionProvider.ANTHROPIC: reasoning_client,
        ExtractionProvider.OPENAI: structured_client,
    })
    client.app.dependency_overrides[get_provider_registry] = lambda: registry

    response = client.get("/api/data-engineer/providers", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == ["anthropic", "openai"]
    assert all(p["available"] is True for p in data)
    assert data[0]["name"] == "Fake anthropic"


def test_unconfigured_providers_are_omitted(client, auth_headers, structured_client):
    registry = ProviderRegistry({ExtractionProvider.OPENAI: structured_client})
    client.app.dependency_overrides[get_provider_registry] = lambda: registry

    response = client.get("/api/data-engineer/providers", headers=auth_headers)

    assert [p["id"] for p in response.json()] == ["openai"]


def test_no_providers(client, auth_headers):
    client.app.dependency_overrides[get_provider_registry] = lambda: ProviderRegistry()

    response = client.get("/api/data-engineer/providers", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []
