import json

import httpx
import pytest

from vitalcare_auth.core.exceptions import InvalidCredentials, LoginFailed
from vitalcare_auth.models.schemas.auth import LoginRequest

from tests.functional.utils.helpers import _login_ok

pytestmark = pytest.mark.asyncio


async def test_login_success_persists_tokens(api, auth_client, session_service, store):
    _login_ok(api, access="T1", refresh="T2")

    data = await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert data.access_token == "T1"
    assert data.refresh_token == "T2"
    assert data.token_type == "bearer"
    assert session_service.is_authenticated() is True
    assert session_service.get_access_token() == "T1"
    assert store.read("refresh_token") == "T2"


async def test_login_request_shape(api, auth_client):
    _login_ok(api)

    await auth_client.login(LoginRequest(identifier="jdoe@example.com", password="secret123"))

    (request,) = api.calls("/auth/login")
    assert request.method == "POST"
    assert str(request.url) == "http://auth.test/auth/login"
    assert request.headers["accept"] == "*/*"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"username_or_email": "jdoe@example.com", "password": "secret123"}


async def test_login_token_ttls(api, auth_client, store, clock):
    _login_ok(api)

    await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert (store.cookies["access_token"].expires_at - clock()).days == 7
    assert (store.cookies["refresh_token"].expires_at - clock()).days == 30


@pytest.mark.parametrize("body", [{"message": "Account locked"}, {}, None])
async def test_login_401_is_invalid_credentials(api, auth_client, session_service, store, body):
    api.reply("POST", "/auth/login", 401, json=body)

    with pytest.raises(InvalidCredentials) as exc:
        await auth_client.login(LoginRequest(identifier="jdoe", password="bad"))

    assert exc.value.message == "Invalid username/email or password."
    assert session_service.is_authenticated() is False
    assert store.cookies == {}


async def test_login_other_error_uses_server_message(api, auth_client, store):
    api.reply("POST", "/auth/login", 400, json={"message": "Username or email is required"})

    with pytest.raises(LoginFailed) as exc:
        await auth_client.login(LoginRequest(identifier="", password="x"))

    assert exc.value.message == "Username or email is required"
    assert store.cookies == {}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"error": "boom"}},
        {"content": b"<html>Internal Server Error</html>"},
        {"json": ["not", "an", "object"]},
    ],
)
async def test_login_other_error_falls_back(api, auth_client, kwargs):
    api.reply("POST", "/auth/login", 500, **kwargs)

    with pytest.raises(LoginFailed) as exc:
        await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert exc.value.message == "Login failed"


async def test_login_without_tokens_is_not_an_error(api, auth_client, session_service, store):
    _login_ok(api, access=None, refresh=None)

    data = await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert data.access_token is None
    assert session_service.is_authenticated() is False
    assert store.cookies == {}


async def test_login_partial_session(api, auth_client, session_service, store):
    # без refresh_token сессия всё равно активна
    _login_ok(api, access="T1", refresh=None)

    await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert session_service.is_authenticated() is True
    assert store.read("refresh_token") is None


async def test_login_transport_error(api, auth_client, session_service):
    api.fail("POST", "/auth/login", httpx.ConnectError("connection refused"))

    with pytest.raises(LoginFailed) as exc:
        await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert "unavailable" in exc.value.message
    assert session_service.is_authenticated() is False


async def test_login_not_retried(api, auth_client):
    api.reply("POST", "/auth/login", 503, json={"message": "Try later"})

    with pytest.raises(LoginFailed):
        await auth_client.login(LoginRequest(identifier="jdoe", password="secret123"))

    assert len(api.calls("/auth/login")) == 1
