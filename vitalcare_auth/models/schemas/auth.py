from __future__ import annotations
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    # на сервер уходит как username_or_email
    identifier: str = Field(
        ...,
        validation_alias=AliasChoices("identifier", "username_or_email"),
        serialization_alias="username_or_email",
    )
    password: str
    model_config = ConfigDict(populate_by_name=True)

    def payload(self) -> dict:
        return self.model_dump(by_alias=True)


class AuthResponse(BaseModel):
    access_token: str | None = None
    refresh_token: str | None = None
    token_type: str | None = None
    # лишние поля ответа сохраняются
    model_config = ConfigDict(extra="allow")
