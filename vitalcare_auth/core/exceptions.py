from __future__ import annotations


class AuthError(Exception):
    """Базовая ошибка клиента: код ошибки + сообщение для пользователя."""
    error = "auth_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def as_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class FormValidationError(AuthError):
    """Локальная ошибка формы, до сети не доходит."""
    error = "validation_error"

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)


class InvalidCredentials(AuthError):
    error = "invalid_credentials"
    default_message = "Invalid username/email or password."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class LoginFailed(AuthError):
    error = "login_failed"


class RegistrationFailed(AuthError):
    error = "registration_failed"


class ApiError(AuthError):
    error = "api_error"

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class NotAuthenticated(AuthError):
    error = "not_authenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
