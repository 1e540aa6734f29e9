import asyncio
from datetime import datetime, timedelta, timezone

import httpx


class FrozenClock:
    """Часы для MemorySessionStore, которые двигаются только вручную."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now += timedelta(**delta)


class FakeAuthApi:
    """Заготовленные ответы по (method, path) и журнал пришедших запросов."""

    def __init__(self):
        self.replies: dict[tuple[str, str], tuple[int, dict]] = {}
        self.errors: dict[tuple[str, str], Exception] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, method: str, path: str, status: int, json=None, content: bytes | None = None):
        if json is not None:
            self.replies[(method, path)] = (status, {"json": json})
        else:
            self.replies[(method, path)] = (status, {"content": content or b""})

    def fail(self, method: str, path: str, error: Exception):
        self.errors[(method, path)] = error

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # отдаём управление циклу, как настоящий сетевой вызов
        await asyncio.sleep(0)
        key = (request.method, request.url.path)
        if key in self.errors:
            raise self.errors[key]
        if key not in self.replies:
            return httpx.Response(404, json={"message": "Not found"})
        status, kwargs = self.replies[key]
        return httpx.Response(status, **kwargs)

    def calls(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


def _register_payload(**overrides) -> dict:
    payload = {
        "username": "jdoe",
        "email": "jdoe@example.com",
        "password": "secret123",
        "name": "John Doe",
        "phone_number": "+855 12 345 678",
        "age": 30,
        "gender": "MALE",
    }
    payload.update(overrides)
    return payload


def _login_ok(api: FakeAuthApi, access: str | None = "T1", refresh: str | None = "T2"):
    body = {"token_type": "bearer"}
    if access is not None:
        body["access_token"] = access
    if refresh is not None:
        body["refresh_token"] = refresh
    api.reply("POST", "/auth/login", 200, json=body)
