from __future__ import annotations
import logging

import httpx
from pydantic import ValidationError

from vitalcare_auth.core.config import settings
from vitalcare_auth.core.exceptions import InvalidCredentials, LoginFailed, RegistrationFailed
from vitalcare_auth.domain.repositories.session_repo import SessionStore
from vitalcare_auth.models.schemas.auth import AuthResponse, LoginRequest
from vitalcare_auth.models.schemas.common import ErrorBody
from vitalcare_auth.models.schemas.user import RegisterRequest

logger = logging.getLogger(__name__)

ACCESS_TOKEN = "access_token"
REFRESH_TOKEN = "refresh_token"

JSON_HEADERS = {
    "accept": "*/*",
    "Content-Type": "application/json",
}


def error_message(response: httpx.Response, fallback: str) -> str:
    """message из JSON-тела ошибки, иначе fallback."""
    try:
        body = ErrorBody.model_validate(response.json())
    except (ValueError, ValidationError):
        return fallback
    return body.message or fallback


def parse_auth_response(response: httpx.Response) -> AuthResponse:
    """Тело успешного ответа; пустое тело даёт пустой AuthResponse."""
    if not response.content:
        return AuthResponse()
    return AuthResponse.model_validate(response.json())


class AuthClient:
    """HTTP клиент для регистрации и входа через удалённый auth API."""

    def __init__(
        self,
        store: SessionStore,
        base_url: str | None = None,
        http: httpx.AsyncClient | None = None,
        access_ttl_days: int | None = None,
        refresh_ttl_days: int | None = None,
    ):
        self.store = store
        self.base_url = (base_url or settings.api.base_url).rstrip("/")
        self.http = http or httpx.AsyncClient(timeout=settings.api.timeout)
        self.access_ttl_days = access_ttl_days or settings.session.access_ttl_days
        self.refresh_ttl_days = refresh_ttl_days or settings.session.refresh_ttl_days

    async def __aenter__(self) -> "AuthClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _post(self, path: str, payload: dict) -> httpx.Response:
        return await self.http.post(f"{self.base_url}{path}", json=payload, headers=JSON_HEADERS)

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """Регистрация. Сессию не создаёт, токены не сохраняются."""
        try:
            response = await self._post("/auth/register", request.payload())
        except httpx.RequestError as e:
            logger.error(f"Auth service unavailable on register: {e}")
            raise RegistrationFailed(f"Auth service unavailable: {e}") from e

        if not response.is_success:
            message = error_message(response, "Registration failed")
            logger.warning(f"Регистрация отклонена ({response.status_code}): {message}")
            raise RegistrationFailed(message)

        try:
            data = parse_auth_response(response)
        except (ValueError, ValidationError) as e:
            logger.error(f"Некорректный ответ на регистрацию: {e}")
            raise RegistrationFailed("Registration failed") from e

        logger.info(f"Пользователь {request.username} зарегистрирован")
        return data

    async def login(self, request: LoginRequest) -> AuthResponse:
        """Вход. При успехе кладёт токены в хранилище сессии."""
        try:
            response = await self._post("/auth/login", request.payload())
        except httpx.RequestError as e:
            logger.error(f"Auth service unavailable on login: {e}")
            raise LoginFailed(f"Auth service unavailable: {e}") from e

        if response.status_code == httpx.codes.UNAUTHORIZED:
            # тело не читаем, сообщение фиксированное
            logger.warning("Неверный логин/email или пароль")
            raise InvalidCredentials()

        if not response.is_success:
            message = error_message(response, "Login failed")
            logger.warning(f"Вход не удался ({response.status_code}): {message}")
            raise LoginFailed(message)

        try:
            data = parse_auth_response(response)
        except (ValueError, ValidationError) as e:
            logger.error(f"Некорректный ответ на вход: {e}")
            raise LoginFailed("Login failed") from e

        # две независимые записи, сессию определяет только access_token
        if data.access_token:
            self.store.persist(ACCESS_TOKEN, data.access_token, self.access_ttl_days)
        if data.refresh_token:
            self.store.persist(REFRESH_TOKEN, data.refresh_token, self.refresh_ttl_days)

        if not data.access_token:
            logger.warning("Ответ на вход не содержит access_token")
        else:
            logger.info("Вход выполнен, токены сохранены")
        return data
