from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

from pydantic import BaseModel
from redis import Redis

from vitalcare_auth.core.cookies import (
    DEFAULT_PATH,
    EPOCH,
    SAME_SITE,
    expires_in_days,
    format_expires,
    now_utc,
)


class StoredCookie(BaseModel):
    """Запись хранилища сессии с атрибутами cookie."""
    name: str
    value: str
    expires_at: datetime
    path: str = DEFAULT_PATH
    secure: bool = True
    same_site: str = SAME_SITE

    def expired(self, now: datetime) -> bool:
        return self.expires_at <= now

    def header(self) -> str:
        parts = [
            f"{self.name}={self.value}",
            f"expires={format_expires(self.expires_at)}",
            f"path={self.path}",
            f"SameSite={self.same_site}",
        ]
        if self.secure:
            parts.append("Secure")
        return "; ".join(parts)


class SessionStore(ABC):
    """Хранилище токенов: у каждого ключа свой срок жизни."""

    @abstractmethod
    def persist(self, key: str, value: str, ttl_days: int) -> None:
        ...

    @abstractmethod
    def read(self, key: str) -> str | None:
        ...

    @abstractmethod
    def erase(self, key: str) -> None:
        ...


class MemorySessionStore(SessionStore):
    """In-memory вариант; сбрасывается при перезапуске процесса."""

    def __init__(self, clock: Callable[[], datetime] = now_utc):
        self.clock = clock
        self.cookies: dict[str, StoredCookie] = {}

    def persist(self, key: str, value: str, ttl_days: int) -> None:
        self.cookies[key] = StoredCookie(
            name=key,
            value=value,
            expires_at=expires_in_days(ttl_days, self.clock()),
        )

    def read(self, key: str) -> str | None:
        cookie = self.cookies.get(key)
        if cookie is None or cookie.expired(self.clock()):
            return None
        return cookie.value

    def erase(self, key: str) -> None:
        # как в браузере: пустое значение и срок в прошлом
        self.cookies[key] = StoredCookie(name=key, value="", expires_at=EPOCH)


class RedisSessionStore(SessionStore):
    """Переживает перезапуск; срок жизни ключей отслеживает сам Redis."""

    def __init__(self, redis: Redis, prefix: str = "vitalcare:session:"):
        self.redis = redis
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def persist(self, key: str, value: str, ttl_days: int) -> None:
        self.redis.set(self._key(key), value, ex=ttl_days * 24 * 60 * 60)

    def read(self, key: str) -> str | None:
        raw = self.redis.get(self._key(key))
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else raw

    def erase(self, key: str) -> None:
        self.redis.delete(self._key(key))
