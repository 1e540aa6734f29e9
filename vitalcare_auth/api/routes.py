from __future__ import annotations
from pydantic import BaseModel

SIGN_IN = "/"
SIGN_UP = "/signup"
FORGOT_PASSWORD = "/forgot-password"
HOME = "/home"
DASHBOARD = "/dashboard"


class Route(BaseModel):
    path: str
    name: str
    protected: bool = False


ROUTES: list[Route] = [
    Route(path=SIGN_IN, name="sign-in"),
    Route(path=SIGN_UP, name="sign-up"),
    # заглушка: восстановление пароля не реализовано
    Route(path=FORGOT_PASSWORD, name="forgot-password"),
    Route(path=HOME, name="home", protected=True),
    Route(path=DASHBOARD, name="dashboard", protected=True),
]

# куда уводит guard, если сессии нет
REDIRECT_TARGET = SIGN_UP
# куда переходим после успешного входа / регистрации
AFTER_LOGIN = DASHBOARD
AFTER_REGISTER = SIGN_IN


def normalize(path: str) -> str:
    path = "/" + path.split("?", 1)[0].split("#", 1)[0].strip("/")
    return path


def is_protected(path: str, routes: list[Route] = ROUTES) -> bool:
    """Защищён ли путь: сам маршрут или любой вложенный в него."""
    path = normalize(path)
    for route in routes:
        if not route.protected:
            continue
        if path == route.path or path.startswith(route.path.rstrip("/") + "/"):
            return True
    return False
