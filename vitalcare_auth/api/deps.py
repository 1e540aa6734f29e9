from __future__ import annotations
from functools import lru_cache

from redis import Redis

from vitalcare_auth.api.guard import RouteGuard
from vitalcare_auth.core.config import SessionBackend, settings
from vitalcare_auth.domain.repositories.session_repo import (
    MemorySessionStore,
    RedisSessionStore,
    SessionStore,
)
from vitalcare_auth.domain.services.auth_service import AuthClient
from vitalcare_auth.domain.services.session_service import SessionService


# хранилище создаётся один раз на процесс
@lru_cache
def get_session_store() -> SessionStore:
    if settings.session.backend is SessionBackend.redis:
        redis = Redis(host=settings.redis.host, port=settings.redis.port, db=settings.redis.db)
        return RedisSessionStore(redis, prefix=settings.session.key_prefix)
    return MemorySessionStore()


def get_auth_client(store: SessionStore | None = None) -> AuthClient:
    return AuthClient(store or get_session_store())


def get_session_service(store: SessionStore | None = None) -> SessionService:
    return SessionService(store or get_session_store())


def get_route_guard(session: SessionService | None = None) -> RouteGuard:
    return RouteGuard(session or get_session_service())
