import asyncio

import httpx
import pytest

from vitalcare_auth.api.guard import RouteGuard
from vitalcare_auth.domain.repositories.session_repo import MemorySessionStore
from vitalcare_auth.domain.services.auth_service import AuthClient
from vitalcare_auth.domain.services.session_service import SessionService

from tests.functional.settings import test_settings
from tests.functional.utils.helpers import FakeAuthApi, FrozenClock


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def store(clock):
    return MemorySessionStore(clock=clock)


@pytest.fixture
def api():
    return FakeAuthApi()


# фикстура HTTP клиента поверх подменённого транспорта
@pytest.fixture(name='http')
def http(api):
    client = httpx.AsyncClient(transport=httpx.MockTransport(api.handler))
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def auth_client(store, http):
    return AuthClient(
        store,
        base_url=test_settings.service_url,
        http=http,
        access_ttl_days=test_settings.access_ttl_days,
        refresh_ttl_days=test_settings.refresh_ttl_days,
    )


@pytest.fixture
def session_service(store, http):
    return SessionService(store, http=http)


@pytest.fixture
def guard(session_service):
    return RouteGuard(session_service)
