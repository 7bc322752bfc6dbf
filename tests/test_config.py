from travel_planner.config import DEFAULT_MODEL, Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("TRAVEL_PLANNER_MODEL", "gemini-2.5-flash")
    monkeypatch.setenv("TRAVEL_PLANNER_MODEL_TIMEOUT", "45")
    monkeypatch.setenv("TRAVEL_PLANNER_ALLOWED_ORIGINS", "http://localhost:5173, https://example.com,")

    settings = Settings.from_env()

    assert settings.api_key == "secret"
    assert settings.model == "gemini-2.5-flash"
    assert settings.model_timeout == 45.0
    assert settings.allowed_origins == ("http://localhost:5173", "https://example.com")


def test_settings_defaults(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "TRAVEL_PLANNER_MODEL",
        "TRAVEL_PLANNER_MODEL_TIMEOUT",
        "TRAVEL_PLANNER_ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TRAVEL_PLANNER_MODEL_TIMEOUT", "not-a-number")

    settings = Settings.from_env()

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.model_timeout == 30.0
    assert settings.allowed_origins == ("*",)


def test_malformed_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("TRAVEL_PLANNER_PORT", "abc")
    assert Settings.from_env().port == 5000

    monkeypatch.setenv("TRAVEL_PLANNER_PORT", "8080")
    assert Settings.from_env().port == 8080
