import pytest

from guiderbooks.configuration import Settings, _csv, _env_int, _optional_int


def test_csv_splits_and_strips():
    assert _csv("https://a.example, https://b.example ,") == ["https://a.example", "https://b.example"]
    assert _csv(None) == []


def test_optional_int():
    assert _optional_int(None) is None
    assert _optional_int("  ") is None
    assert _optional_int("5000") == 5000


def test_env_int_defaults_and_parses(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert _env_int("PORT", 5050) == 5050
    monkeypatch.setenv("PORT", "8080")
    assert _env_int("PORT", 5050) == 8080


def test_env_int_malformed_value_names_the_variable(monkeypatch):
    monkeypatch.setenv("MAX_CONTENT_CHARS", "12k")
    with pytest.raises(ValueError, match="MAX_CONTENT_CHARS must be an integer, got '12k'"):
        _env_int("MAX_CONTENT_CHARS")


def test_settings_accept_overrides():
    cfg = Settings(openai_api_key="sk-test", mongodb_uri=None, cors_origins=["http://localhost:3000"])
    assert cfg.openai_api_key == "sk-test"
    assert cfg.mongodb_uri is None
    assert cfg.cors_origins == ["http://localhost:3000"]
