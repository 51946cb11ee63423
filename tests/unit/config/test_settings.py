"""Tests for settings loading from environment and YAML."""

import pytest

from weekgrid.config import settings as settings_module
from weekgrid.config.settings import WeekGridSettings, get_settings, reset_settings

ENV_VARS = [
    "WEEKGRID_ICS_URL",
    "WEEKGRID_API_KEY",
    "WEEKGRID_CALENDAR_ID",
    "WEEKGRID_MAX_RESULTS",
    "WEEKGRID_CACHE_TTL",
    "WEEKGRID_LOG_LEVEL",
    "WEEKGRID_CONFIG_FILE",
    "WEEKGRID_CONFIG_DIR",
    "GOOGLE_CALENDAR_API_KEY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


def make_settings(tmp_path, **kwargs):
    return WeekGridSettings(_env_file=None, config_dir=tmp_path, **kwargs)


class TestWeekGridSettings:
    """Test WeekGridSettings sources and precedence."""

    def test_defaults(self, tmp_path):
        settings = make_settings(tmp_path)

        assert settings.ics_url is None
        assert settings.api_key is None
        assert settings.calendar_id == "primary"
        assert settings.max_results == 50
        assert settings.cache_ttl == 300
        assert (settings.grid_origin_hour, settings.grid_end_hour) == (7, 20)

    def test_prefixed_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WEEKGRID_ICS_URL", "https://example.com/cal.ics")
        monkeypatch.setenv("WEEKGRID_MAX_RESULTS", "10")

        settings = make_settings(tmp_path)

        assert settings.ics_url == "https://example.com/cal.ics"
        assert settings.max_results == 10

    @pytest.mark.parametrize("env_name", ["WEEKGRID_API_KEY", "GOOGLE_CALENDAR_API_KEY"])
    def test_api_key_environment_names(self, tmp_path, monkeypatch, env_name):
        monkeypatch.setenv(env_name, "secret")

        assert make_settings(tmp_path).api_key == "secret"

    def test_yaml_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "ics:\n"
            "  url: https://yaml.example.com/cal.ics\n"
            "google:\n"
            "  calendar_id: family\n"
            "cache_ttl: 60\n"
            "grid:\n"
            "  origin_hour: 6\n"
        )

        settings = make_settings(tmp_path)

        assert settings.ics_url == "https://yaml.example.com/cal.ics"
        assert settings.calendar_id == "family"
        assert settings.cache_ttl == 60
        assert settings.grid_origin_hour == 6

    def test_explicit_config_file(self, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("google:\n  api_key: from-yaml\n")

        settings = make_settings(tmp_path, config_file=config_file)

        assert settings.api_key == "from-yaml"

    def test_environment_wins_over_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text("cache_ttl: 60\n")
        monkeypatch.setenv("WEEKGRID_CACHE_TTL", "120")

        assert make_settings(tmp_path).cache_ttl == 120

    def test_invalid_yaml_is_ignored(self, tmp_path):
        (tmp_path / "config.yaml").write_text("cache_ttl: [unclosed\n")

        assert make_settings(tmp_path).cache_ttl == 300


class TestGlobalSettings:
    """Test the lazily created settings instance."""

    def test_get_settings_is_memoized(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WEEKGRID_CONFIG_DIR", str(tmp_path))

        assert get_settings() is get_settings()

    def test_reset_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WEEKGRID_CONFIG_DIR", str(tmp_path))
        first = get_settings()

        reset_settings()

        assert settings_module._settings_instance is None
        assert get_settings() is not first
