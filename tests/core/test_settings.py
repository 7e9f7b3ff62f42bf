"""Tests for configuration settings."""

from pathlib import Path

from bi_profiler.core.config import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.relationship_min_strength == 0.3
    assert settings.relationship_min_samples == 3
    assert settings.dependency_min_confidence == 0.95
    assert settings.log_level == "INFO"


def test_default_config_path_ships_patterns():
    settings = Settings()
    assert (settings.config_path / "patterns" / "default.yaml").is_file()


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("BI_PROFILER_RELATIONSHIP_MIN_STRENGTH", "0.5")
    monkeypatch.setenv("BI_PROFILER_CONFIG_PATH", str(tmp_path))

    settings = Settings()

    assert settings.relationship_min_strength == 0.5
    assert settings.config_path == Path(tmp_path)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
