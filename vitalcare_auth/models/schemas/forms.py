from __future__ import annotations
import re

from pydantic import BaseModel

from vitalcare_auth.models.schemas.auth import LoginRequest
from vitalcare_auth.models.schemas.user import Gender, RegisterRequest

# field -> сообщение; ключ есть только у невалидных полей
FieldErrors = dict[str, str]

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_age(value: int | str | None) -> int | None:
    """None, если возраст не задан; ValueError, если задан не целым числом."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("age must be an integer")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    # только знак и цифры, без "1_0" и прочего синтаксиса int()
    if not INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


class SignInFormData(BaseModel):
    identifier: str = ""
    password: str = ""

    def to_request(self) -> LoginRequest:
        return LoginRequest(identifier=self.identifier, password=self.password)


class SignUpFormData(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""
    name: str = ""
    phone_number: str = ""
    # None значит Unset; строка хранится как есть и разбирается валидатором
    age: int | str | None = None
    gender: Gender | str | None = Gender.MALE

    def to_request(self) -> RegisterRequest:
        # вызывать только после validate_registration
        return RegisterRequest(
            username=self.username,
            email=self.email,
            password=self.password,
            name=self.name,
            phone_number=self.phone_number,
            age=parse_age(self.age),
            gender=Gender(self.gender),
        )
