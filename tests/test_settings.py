"""Tests for application settings."""

import pytest

from feedback_views.configs import PresentationSettings, Settings, get_settings


class TestPresentationSettings:
    """Tests for PresentationSettings defaults and environment mapping."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ACCESS_KEY_PARAM", "NO_SECTION_NAME", "HIDE_LINKS_ON_LOAD"):
            monkeypatch.delenv(f"FEEDBACK_VIEWS_{name}", raising=False)

        settings = PresentationSettings(_env_file=None)

        assert settings.access_key_param == "key"
        assert settings.no_section_name == "None"
        assert settings.hide_links_on_load is True

    def test_environment_should_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEEDBACK_VIEWS_ACCESS_KEY_PARAM", "regkey")
        monkeypatch.setenv("FEEDBACK_VIEWS_HIDE_LINKS_ON_LOAD", "false")

        settings = PresentationSettings(_env_file=None)

        assert settings.access_key_param == "regkey"
        assert settings.hide_links_on_load is False


class TestGetSettings:
    """Tests for the cached settings factory."""

    def test_should_return_cached_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_should_aggregate_presentation_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEEDBACK_VIEWS_NO_SECTION_NAME", "Unassigned")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert isinstance(settings, Settings)
        assert settings.presentation.no_section_name == "Unassigned"
        assert settings.log_level == "DEBUG"

    def test_base_settings_should_carry_only_log_level(self) -> None:
        assert set(Settings.model_fields) == {"log_level", "presentation"}
