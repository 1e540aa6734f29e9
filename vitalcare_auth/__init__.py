from vitalcare_auth.api.guard import GuardResult, GuardState, RouteGuard
from vitalcare_auth.domain.repositories.session_repo import MemorySessionStore, RedisSessionStore, SessionStore
from vitalcare_auth.domain.services.auth_service import AuthClient
from vitalcare_auth.domain.services.session_service import SessionService
from vitalcare_auth.domain.validators import password_strength, validate_login, validate_registration

__all__ = [
    "AuthClient",
    "SessionService",
    "SessionStore",
    "MemorySessionStore",
    "RedisSessionStore",
    "RouteGuard",
    "GuardResult",
    "GuardState",
    "validate_login",
    "validate_registration",
    "password_strength",
]
