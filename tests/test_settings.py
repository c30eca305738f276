import pytest

from tripboard.config.settings import Settings


def test_defaults(monkeypatch):
    for key in (
        "TRIPBOARD_PLACEHOLDER",
        "TRIPBOARD_MARKER",
        "TRIPBOARD_UI",
        "TRIPBOARD_UI_HOST",
        "TRIPBOARD_UI_PORT",
        "TRIPBOARD_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()
    assert settings.placeholder == "名無し"
    assert settings.marker == "◆"
    assert settings.ui_enabled is True
    assert settings.ui_host == "127.0.0.1"
    assert settings.ui_port == 5000
    assert settings.debug is False


def test_overrides(monkeypatch):
    monkeypatch.setenv("TRIPBOARD_PLACEHOLDER", "anon")
    monkeypatch.setenv("TRIPBOARD_UI", "0")
    monkeypatch.setenv("TRIPBOARD_UI_HOST", "0.0.0.0")
    monkeypatch.setenv("TRIPBOARD_UI_PORT", "8080")
    monkeypatch.setenv("TRIPBOARD_DEBUG", "1")

    settings = Settings.from_env()
    assert settings.placeholder == "anon"
    assert settings.ui_enabled is False
    assert settings.ui_host == "0.0.0.0"
    assert settings.ui_port == 8080
    assert settings.debug is True


def test_marker_is_not_configurable_from_env(monkeypatch):
    monkeypatch.setenv("TRIPBOARD_MARKER", "!")
    assert Settings.from_env().marker == "◆"


def test_bad_port_raises(monkeypatch):
    monkeypatch.setenv("TRIPBOARD_UI_PORT", "not-a-port")
    with pytest.raises(ValueError):
        Settings.from_env()
