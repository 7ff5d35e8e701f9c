"""
Unit tests for lambdakit engine settings.
"""

import logging

import pytest

from lambdakit.config import STRICT_ARITY_ENV, Settings, configure, get_settings, override


class TestSettings:
    """Tests for the settings dataclass and its environment seed."""

    def test_defaults(self):
        assert Settings().strict_arity is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_from_env_truthy(self, monkeypatch, raw):
        monkeypatch.setenv(STRICT_ARITY_ENV, raw)
        assert Settings.from_env().strict_arity is True

    @pytest.mark.parametrize("raw", ["", "0", "false", "nope"])
    def test_from_env_falsy(self, monkeypatch, raw):
        monkeypatch.setenv(STRICT_ARITY_ENV, raw)
        assert Settings.from_env().strict_arity is False


@pytest.mark.usefixtures("restore_settings")
class TestConfigure:
    """Tests for configure and override."""

    def test_configure_replaces_active(self):
        settings = configure(strict_arity=True)
        assert settings.strict_arity is True
        assert get_settings() is settings

    def test_configure_unknown_setting(self):
        with pytest.raises(TypeError, match="Unknown setting"):
            configure(verbose=True)

    def test_override_restores(self):
        before = get_settings()
        with override(strict_arity=not before.strict_arity) as inside:
            assert get_settings() is inside
        assert get_settings() is before

    def test_override_restores_on_error(self):
        before = get_settings()
        with pytest.raises(RuntimeError):
            with override(strict_arity=True):
                raise RuntimeError("boom")
        assert get_settings() is before

    def test_configure_logs_change(self, caplog):
        with caplog.at_level(logging.INFO, logger="lambdakit.config"):
            configure(strict_arity=True)
        assert "settings updated" in caplog.text
