from __future__ import annotations

import pytest
from pydantic import ValidationError

from beancount_shorthand.infrastructure.config.settings import BaseAppSettings, get_settings


def test_settings_test_profile_defaults() -> None:
    # ENV unset selects the test profile: DEBUG, console logs
    s = get_settings(ignore_env_file=True)
    assert s.env == "test"
    assert s.log_level.upper() == "DEBUG"
    assert s.json_logs is False
    assert s.logging_enabled is True
    assert s.timezone == "UTC"
    assert s.config is None
    assert s.accounts_file is None


def test_settings_prod_profile_defaults() -> None:
    s = get_settings(forced_env="production", ignore_env_file=True)
    assert s.env == "production"
    assert s.log_level.upper() == "INFO"
    assert s.json_logs is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("ACCOUNTS_FILE", "/etc/beancount/accounts.toml")
    monkeypatch.setenv("TIMEZONE", "Australia/Sydney")
    s: BaseAppSettings = get_settings(ignore_env_file=True)
    assert s.env == "production"
    assert s.log_level.upper() == "WARNING"
    assert s.json_logs is False
    assert s.accounts_file == "/etc/beancount/accounts.toml"
    assert s.timezone == "Australia/Sydney"


def test_forced_env_switch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "production")
    s = get_settings(forced_env="test", ignore_env_file=True)
    assert s.env == "test"


def test_namespaced_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BEANSHORT__CONFIG", 'currency = "AUD"')
    monkeypatch.setenv("BEANSHORT__LOG_LEVEL", "warning")
    s = get_settings(ignore_env_file=True)
    assert s.config == 'currency = "AUD"'
    assert s.log_level.upper() == "WARNING"


def test_unknown_timezone_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(ValidationError):
        get_settings(ignore_env_file=True)


def test_logging_enabled_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGGING_ENABLED", "false")
    s = get_settings(ignore_env_file=True)
    assert s.logging_enabled is False
