import base64
from unittest.mock import AsyncMock, patch

import pytest
from emma.config import ProviderConfig, get_provider_config
from emma.helpers.speech import SpeechOutcome
from emma.schemas.api_speech import BrowserSpeechResponse
from fastapi.testclient import TestClient
from main import app


@pytest.fixture
def demo_client():
    """Test client with no API key configured"""
    app.dependency_overrides[get_provider_config] = lambda: ProviderConfig(api_key=None)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def live_client():
    """Test client with a fake API key configured"""
    app.dependency_overrides[get_provider_config] = lambda: ProviderConfig(api_key="sk-test")
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_tts_demo_mode(demo_client):
    response = demo_client.post("/api/tts", json={"text": "hello"})

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "mode": "browser",
        "message": "Use browser SpeechSynthesis API",
        "text": "hello",
    }


def test_tts_demo_mode_truncates_text(demo_client):
    response = demo_client.post("/api/tts", json={"text": "x" * 1500})

    assert response.status_code == 200
    assert len(response.json()["text"]) == 1000


def test_tts_missing_text(demo_client):
    response = demo_client.post("/api/tts", json={"voice": "nova"})

    assert response.status_code == 400
    assert response.json() == {"error": "Text is required"}


def test_tts_get_not_allowed(demo_client):
    response = demo_client.get("/api/tts")

    assert response.status_code == 405
    assert response.json()["error"]
    assert "POST" in response.headers["allow"]


def test_tts_options_preflight(demo_client):
    response = demo_client.options("/api/tts")

    assert response.status_code == 200


@patch("emma.helpers.speech.generate_speech", new_callable=AsyncMock)
def test_tts_live_mode_default_voice(mock_speech, live_client):
    mock_speech.return_value = b"ID3-fake-mp3"

    response = live_client.post("/api/tts", json={"text": "Welcome back, Zee"})

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["mode"] == "openai"
    assert data["format"] == "mp3"
    assert data["voice"] == "nova"
    assert base64.b64decode(data["audio"]) == b"ID3-fake-mp3"
    assert mock_speech.call_args.args[:2] == ("Welcome back, Zee", "nova")


@patch("emma.helpers.speech.generate_speech", new_callable=AsyncMock)
def test_tts_live_mode_failure_uses_browser(mock_speech, live_client):
    mock_speech.side_effect = RuntimeError("boom")

    response = live_client.post("/api/tts", json={"text": "hello", "voice": "alloy"})

    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "browser"
    assert data["message"] == "TTS error, use browser fallback"
    assert data["text"] == "hello"


@patch("emma.routers.tts.respond_to_speech", new_callable=AsyncMock)
def test_tts_uses_outcome_status_code(mock_respond, demo_client):
    mock_respond.return_value = SpeechOutcome(
        body=BrowserSpeechResponse(message="Use browser SpeechSynthesis API", text="hello"),
        status_code=203,
        degraded=True,
    )

    response = demo_client.post("/api/tts", json={"text": "hello"})

    assert response.status_code == 203
    assert response.json()["mode"] == "browser"
