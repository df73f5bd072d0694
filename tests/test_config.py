import pytest

from hoop_entry.config import get_settings_module


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "hoop_entry.config.production"),
        ("PROD", "hoop_entry.config.production"),
        ("test", "hoop_entry.config.testing"),
        ("anything", "hoop_entry.config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "hoop_entry.config.development"
