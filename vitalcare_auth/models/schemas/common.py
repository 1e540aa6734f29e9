from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class ErrorBody(BaseModel):
    """Тело ошибки от сервера; нас интересует только message."""
    message: str | None = None
    model_config = ConfigDict(extra="ignore")


class PasswordStrength(BaseModel):
    bars: int
    label: str
    color: str
