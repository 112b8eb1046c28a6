import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app
from services.errors import ConfigurationError


def test_startup_without_api_key_fails():
    app = create_app(Settings(google_api_key=None))

    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass


def test_startup_with_injected_provider_skips_gemini(app):
    service = app.state.model_service

    with TestClient(app) as client:
        assert client.get("/").status_code == 200

    assert app.state.model_service is service
