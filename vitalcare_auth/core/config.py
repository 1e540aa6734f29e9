import logging
from enum import Enum
from logging import config as logging_config

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vitalcare_auth.core.logger import LOGGING


class SessionBackend(str, Enum):
    memory = "memory"
    redis = "redis"


class ApiSettings(BaseSettings):
    """Адрес удалённого auth API."""
    base_url: str = Field("http://localhost:8000", validation_alias="API_BASE_URL")
    # None: таймаут транспорта по умолчанию
    timeout: float | None = Field(None, validation_alias="API_TIMEOUT")


class SessionSettings(BaseSettings):
    """Сроки жизни токенов и хранилище сессии."""
    access_ttl_days: int = Field(7, validation_alias="ACCESS_TTL_DAYS")
    refresh_ttl_days: int = Field(30, validation_alias="REFRESH_TTL_DAYS")
    backend: SessionBackend = Field(SessionBackend.memory, validation_alias="SESSION_BACKEND")
    key_prefix: str = Field("vitalcare:session:", validation_alias="SESSION_KEY_PREFIX")


class RedisSettings(BaseSettings):
    """Настройки для подключения к Redis."""
    host: str = Field("localhost", validation_alias='REDIS_HOST')
    port: int = Field(6379, validation_alias='REDIS_PORT')
    db: int = Field(0, validation_alias='REDIS_DB')


class ProjectSettings(BaseSettings):
    """Текстовая информация о проекте"""
    name: str = Field("VitalCare", validation_alias='PROJECT_NAME')


class AppSettings(BaseSettings):
    """Основной класс с настройками приложения."""
    model_config = SettingsConfigDict(
        env_nested_delimiter='__',
        env_file_encoding='utf-8'
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    pr: ProjectSettings = Field(default_factory=ProjectSettings)


try:
    settings = AppSettings()
except Exception as e:
    logging.error(f"Ошибка при загрузке конфигурации: {e}")
    raise

logging_config.dictConfig(LOGGING)
