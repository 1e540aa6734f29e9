from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^\S+@\S+\.\S+$"

AGE_MIN = 1
AGE_MAX = 120
PASSWORD_MIN_LENGTH = 6


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    age: int = Field(..., ge=AGE_MIN, le=AGE_MAX)
    gender: Gender

    def payload(self) -> dict:
        return self.model_dump(mode="json")
