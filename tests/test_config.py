"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from visa_guide.config import DEFAULT_DATASET_URL, DEFAULT_RULES_ROOT, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("VISA_DATASET_URL", "VISA_RULES_ROOT", "VISA_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()
    assert settings.dataset_url == DEFAULT_DATASET_URL
    assert settings.rules_root == DEFAULT_RULES_ROOT
    assert settings.http_timeout == 30.0


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("VISA_DATASET_URL", "https://example.com/data.csv")
    monkeypatch.setenv("VISA_RULES_ROOT", str(tmp_path))
    monkeypatch.setenv("VISA_HTTP_TIMEOUT", "5")

    settings = get_settings()

    assert settings.dataset_url == "https://example.com/data.csv"
    assert settings.rules_root == Path(tmp_path)
    assert settings.http_timeout == 5.0


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("VISA_HTTP_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        get_settings()
