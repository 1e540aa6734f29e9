import asyncio
import json

import typer

from vitalcare_auth.api.deps import get_auth_client, get_route_guard, get_session_service
from vitalcare_auth.core.config import settings
from vitalcare_auth.core.exceptions import AuthError
from vitalcare_auth.domain.forms import BaseForm, SignInForm, SignUpForm
from vitalcare_auth.models.schemas.user import Gender

app = typer.Typer(help=f"{settings.pr.name}: вход, регистрация и сессия")


def _report(form: BaseForm) -> None:
    for field, message in form.field_errors.items():
        typer.secho(f"{field}: {message}", fg=typer.colors.RED, err=True)
    if form.error:
        typer.secho(form.error, fg=typer.colors.RED, err=True)


async def _submit(form: BaseForm, values: dict) -> str | None:
    async with form.client:
        for field, value in values.items():
            form.change(field, value)
        return await form.submit()


@app.command("login")
def login(
    identifier: str = typer.Option(..., "--identifier", "-u", help="Username or email"),
    password: str = typer.Option(..., prompt=True, hide_input=True),
):
    """Войти и сохранить токены."""
    form = SignInForm(get_auth_client())
    target = asyncio.run(_submit(form, {"identifier": identifier, "password": password}))
    if target is None:
        _report(form)
        raise typer.Exit(code=1)
    typer.secho(f"Вход выполнен, переход на {target}", fg=typer.colors.GREEN)


@app.command("register")
def register(
    username: str = typer.Option(..., help="Username"),
    email: str = typer.Option(..., help="Email"),
    name: str = typer.Option(..., help="Full name"),
    phone_number: str = typer.Option(..., "--phone", help="Phone number"),
    age: str = typer.Option(..., help="Age, 1..120"),
    gender: Gender = typer.Option(Gender.MALE, case_sensitive=False),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
):
    """Зарегистрировать пользователя (сессия не создаётся)."""
    form = SignUpForm(get_auth_client())
    values = {
        "username": username,
        "email": email,
        "name": name,
        "phone_number": phone_number,
        "age": age,
        "gender": gender,
        "password": password,
    }
    target = asyncio.run(_submit(form, values))
    if target is None:
        _report(form)
        raise typer.Exit(code=1)
    typer.echo(f"Надёжность пароля: {form.strength.label}")
    typer.secho(f"Пользователь {username} зарегистрирован, переход на {target}", fg=typer.colors.GREEN)


@app.command("logout")
def logout():
    """Удалить токены локально."""
    get_session_service().logout()
    typer.echo("Сессия завершена")


@app.command("status")
def status():
    """Показать, есть ли активная сессия."""
    if get_session_service().is_authenticated():
        typer.secho("authenticated", fg=typer.colors.GREEN)
    else:
        typer.echo("anonymous")
        raise typer.Exit(code=1)


@app.command("check-route")
def check_route(path: str = typer.Argument(..., help="Path to navigate to")):
    """Решение guard для перехода на путь."""
    result = get_route_guard().check(path)
    if result.allowed:
        typer.echo(f"allowed {result.path}")
    else:
        typer.echo(f"redirect {result.path} -> {result.target}")


@app.command("fetch")
def fetch(
    url: str = typer.Argument(..., help="Protected URL"),
    method: str = typer.Option("GET", help="HTTP method"),
):
    """Запрос к защищённому ресурсу с bearer-токеном."""
    try:
        data = asyncio.run(get_session_service().fetch_protected_data(url, method=method.upper()))
    except AuthError as e:
        typer.secho(e.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
