from __future__ import annotations

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["test", "production"]


def _prefixed(name: str) -> AliasChoices:
    return AliasChoices(f"BEANSHORT__{name}", name)


class BaseAppSettings(BaseSettings):
    """
    Process settings loaded from ENV/.env via pydantic-settings.

    The account table itself is not a setting: ``config`` holds its TOML text
    (the ``CONFIG`` variable used by serverless deployments) and
    ``accounts_file`` points at a TOML file; see
    ``infrastructure.config.accounts``.
    """

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))
    logging_enabled: bool = Field(alias="LOGGING_ENABLED", default=True, validation_alias=_prefixed("LOGGING_ENABLED"))

    # Size-based rotation, used only when log_file is set
    log_file: str | None = Field(alias="LOG_FILE", default=None, validation_alias=_prefixed("LOG_FILE"))
    log_max_bytes: int = Field(alias="LOG_MAX_BYTES", default=10_485_760, validation_alias=_prefixed("LOG_MAX_BYTES"))
    log_backup_count: int = Field(alias="LOG_BACKUP_COUNT", default=7, validation_alias=_prefixed("LOG_BACKUP_COUNT"))

    # Account table sources: inline TOML wins over the file
    config: str | None = Field(alias="CONFIG", default=None, validation_alias=_prefixed("CONFIG"))
    accounts_file: str | None = Field(alias="ACCOUNTS_FILE", default=None, validation_alias=_prefixed("ACCOUNTS_FILE"))

    # Zone used to resolve "today" for lines typed without a date
    timezone: str = Field(alias="TIMEZONE", default="UTC", validation_alias=_prefixed("TIMEZONE"))

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v!r}") from exc
        return v


class TestSettings(BaseAppSettings):
    """
    Test profile: verbose console logs.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="DEBUG", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))


class ProdSettings(BaseAppSettings):
    """
    Production profile: JSON logs by default.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    env: EnvName = Field(default="production")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=True, validation_alias=_prefixed("JSON_LOGS"))


# Profiles that skip .env, for isolated tests
class TestSettingsNoFile(TestSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


class ProdSettingsNoFile(ProdSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


@lru_cache(maxsize=8)
def get_settings(forced_env: EnvName | None = None, *, ignore_env_file: bool = False) -> BaseAppSettings:
    """
    Cached settings factory driven by ENV.

    Parameters:
    - forced_env: select a profile ("test" or "production") regardless of ENV.
    - ignore_env_file: skip reading .env (uses the *NoFile classes).
    """
    import os

    selector: EnvName = forced_env or os.getenv("ENV", "test")  # type: ignore[assignment]
    if selector == "production":
        cls = ProdSettingsNoFile if ignore_env_file else ProdSettings
    else:
        cls = TestSettingsNoFile if ignore_env_file else TestSettings

    instance = cls()
    instance.env = selector
    return instance
