from __future__ import annotations
import logging
from typing import Any

import httpx

from vitalcare_auth.core.exceptions import ApiError, NotAuthenticated
from vitalcare_auth.domain.repositories.session_repo import SessionStore
from vitalcare_auth.domain.services.auth_service import ACCESS_TOKEN, REFRESH_TOKEN

logger = logging.getLogger(__name__)


class SessionService:
    """Чтение состояния сессии поверх хранилища. Сеть нужна только для fetch_protected_data."""

    def __init__(self, store: SessionStore, http: httpx.AsyncClient | None = None):
        self.store = store
        self.http = http

    def is_authenticated(self) -> bool:
        return bool(self.store.read(ACCESS_TOKEN))

    def get_access_token(self) -> str | None:
        return self.store.read(ACCESS_TOKEN) or None

    def logout(self) -> None:
        # только локально, сервер не уведомляется
        self.store.erase(ACCESS_TOKEN)
        self.store.erase(REFRESH_TOKEN)
        logger.info("Сессия завершена")

    def auth_headers(self) -> dict[str, str]:
        token = self.get_access_token()
        if not token:
            raise NotAuthenticated()
        return {"Authorization": f"Bearer {token}"}

    async def fetch_protected_data(self, url: str, method: str = "GET", **options: Any) -> Any:
        """Запрос с bearer-токеном. Без токена запрос не отправляется."""
        headers = httpx.Headers(options.pop("headers", None))
        headers.update(self.auth_headers())
        headers["Content-Type"] = "application/json"

        try:
            if self.http is None:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, headers=headers, **options)
            else:
                response = await self.http.request(method, url, headers=headers, **options)
        except httpx.RequestError as e:
            logger.error(f"Protected request {method} {url} failed: {e}")
            raise ApiError(httpx.codes.SERVICE_UNAVAILABLE, f"API Error: service unavailable: {e}") from e

        if not response.is_success:
            logger.warning(f"Protected request {method} {url} failed: {response.status_code}")
            raise ApiError(response.status_code, f"API Error: {response.reason_phrase}")
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(response.status_code, "API Error: invalid JSON response") from e
