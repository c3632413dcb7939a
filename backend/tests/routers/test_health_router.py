from emma.config import ProviderConfig, get_provider_config
from fastapi.testclient import TestClient
from main import app


def test_health_reports_mode():
    app.dependency_overrides[get_provider_config] = lambda: ProviderConfig(api_key="sk-test")
    try:
        response = TestClient(app).get("/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "mode": "live"}
