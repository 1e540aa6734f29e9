from __future__ import annotations
import logging
from enum import Enum

from pydantic import BaseModel

from vitalcare_auth.api.routes import REDIRECT_TARGET, ROUTES, Route, is_protected, normalize
from vitalcare_auth.domain.services.session_service import SessionService

logger = logging.getLogger(__name__)


class GuardState(str, Enum):
    ALLOWED = "allowed"
    REDIRECTED = "redirected"


class GuardResult(BaseModel):
    state: GuardState
    path: str
    # куда уводим при редиректе; replace заменяет запись в истории
    target: str | None = None
    replace: bool = False

    @property
    def allowed(self) -> bool:
        return self.state is GuardState.ALLOWED


class RouteGuard:
    """Пускает в защищённые разделы только при наличии access_token.

    Проверка синхронная и локальная, сервер не опрашивается,
    поэтому промежуточного состояния загрузки нет.
    """

    def __init__(self, session: SessionService, routes: list[Route] = ROUTES, redirect_to: str = REDIRECT_TARGET):
        self.session = session
        self.routes = routes
        self.redirect_to = redirect_to

    def check(self, path: str) -> GuardResult:
        path = normalize(path)
        if not is_protected(path, self.routes) or self.session.is_authenticated():
            return GuardResult(state=GuardState.ALLOWED, path=path)

        logger.info(f"Нет сессии, {path} -> {self.redirect_to}")
        return GuardResult(
            state=GuardState.REDIRECTED,
            path=path,
            target=self.redirect_to,
            replace=True,
        )
