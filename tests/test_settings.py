from config.settings import get_settings


def test_defaults(monkeypatch):
    for name in ("PORT", "GEMINI_MODEL", "SERIALIZE_PERSONA_REQUESTS", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "abc")

    settings = get_settings()

    assert settings.port == 2000
    assert settings.google_api_key == "abc"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.serialize_persona_requests is True
    assert settings.cors_origins == ["*"]


def test_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GOOGLE_API_KEY", "")
    monkeypatch.setenv("SERIALIZE_PERSONA_REQUESTS", "false")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")

    settings = get_settings()

    assert settings.port == 8080
    assert settings.google_api_key is None
    assert settings.serialize_persona_requests is False
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
