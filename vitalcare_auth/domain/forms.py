from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any

from vitalcare_auth.api.routes import AFTER_LOGIN, AFTER_REGISTER
from vitalcare_auth.core.exceptions import AuthError, FormValidationError
from vitalcare_auth.domain.services.auth_service import AuthClient
from vitalcare_auth.domain.validators import ensure_valid, password_strength, validate_login, validate_registration
from vitalcare_auth.models.schemas.common import PasswordStrength
from vitalcare_auth.models.schemas.forms import FieldErrors, SignInFormData, SignUpFormData

logger = logging.getLogger(__name__)


class BaseForm(ABC):
    """Состояние экрана формы без отрисовки: данные, ошибки полей, общая ошибка, loading."""
    data_class: type[SignInFormData] | type[SignUpFormData]
    fallback_error = "An unexpected error occurred"

    def __init__(self, client: AuthClient):
        self.client = client
        self.data = self.data_class()
        self.field_errors: FieldErrors = {}
        self.error: str | None = None
        self.loading = False

    def change(self, field: str, value: Any) -> None:
        if field not in self.data_class.model_fields:
            raise KeyError(field)
        setattr(self.data, field, value)
        self.field_errors.pop(field, None)
        self.error = None

    @abstractmethod
    def validate(self) -> FieldErrors:
        ...

    @abstractmethod
    async def send(self) -> str:
        """Сетевой вызов; возвращает путь для перехода."""
        ...

    async def submit(self) -> str | None:
        # повторная отправка, пока первая в полёте, игнорируется
        if self.loading:
            return None

        self.error = None
        self.field_errors = {}
        try:
            ensure_valid(self.validate())
        except FormValidationError as e:
            logger.debug(f"Форма не прошла проверку: {sorted(e.errors)}")
            self.field_errors = e.errors
            return None

        self.loading = True
        try:
            return await self.send()
        except AuthError as e:
            self.error = e.message or self.fallback_error
            return None
        finally:
            self.loading = False


class SignInForm(BaseForm):
    data_class = SignInFormData

    def validate(self) -> FieldErrors:
        return validate_login(self.data)

    async def send(self) -> str:
        await self.client.login(self.data.to_request())
        return AFTER_LOGIN


class SignUpForm(BaseForm):
    data_class = SignUpFormData
    fallback_error = "Registration failed"

    @property
    def strength(self) -> PasswordStrength:
        return password_strength(self.data.password)

    def validate(self) -> FieldErrors:
        return validate_registration(self.data)

    async def send(self) -> str:
        await self.client.register(self.data.to_request())
        return AFTER_REGISTER
