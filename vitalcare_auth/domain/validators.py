from __future__ import annotations
import re

from vitalcare_auth.core.exceptions import FormValidationError
from vitalcare_auth.models.schemas.common import PasswordStrength
from vitalcare_auth.models.schemas.forms import FieldErrors, SignInFormData, SignUpFormData, parse_age
from vitalcare_auth.models.schemas.user import (
    AGE_MAX,
    AGE_MIN,
    EMAIL_PATTERN,
    PASSWORD_MIN_LENGTH,
    Gender,
)

EMAIL_RE = re.compile(EMAIL_PATTERN)
SYMBOLS_RE = re.compile(r"[@$!%*?&#]")


def _blank(value: str | None) -> bool:
    return not (value or "").strip()


def is_valid_email(value: str | None) -> bool:
    # fullmatch: $ в re пропускает завершающий перевод строки
    return bool(value) and EMAIL_RE.fullmatch(value) is not None


def ensure_valid(errors: FieldErrors) -> None:
    if errors:
        raise FormValidationError(errors)


def validate_login(data: SignInFormData) -> FieldErrors:
    errors: FieldErrors = {}
    if _blank(data.identifier):
        errors["identifier"] = "Email or Username is required"
    if _blank(data.password):
        errors["password"] = "Password is required"
    return errors


def validate_registration(data: SignUpFormData) -> FieldErrors:
    errors: FieldErrors = {}

    if _blank(data.email):
        errors["email"] = "Email is required"
    elif not is_valid_email(data.email):
        errors["email"] = "Enter a valid email address"

    if _blank(data.username):
        errors["username"] = "Username is required"
    if _blank(data.name):
        errors["name"] = "Name is required"
    if _blank(data.phone_number):
        errors["phone_number"] = "Phone number is required"

    try:
        age = parse_age(data.age)
    except ValueError:
        errors["age"] = "Age must be a number"
    else:
        if age is None:
            errors["age"] = "Age is required"
        elif not AGE_MIN <= age <= AGE_MAX:
            errors["age"] = f"Age must be between {AGE_MIN} and {AGE_MAX}"

    gender = data.gender.value if isinstance(data.gender, Gender) else data.gender
    if not gender:
        errors["gender"] = "Gender is required"
    elif gender not in {g.value for g in Gender}:
        errors["gender"] = "Select a valid gender"

    if not data.password:
        errors["password"] = "Password is required"
    elif len(data.password) < PASSWORD_MIN_LENGTH:
        errors["password"] = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"

    return errors


def password_strength(password: str) -> PasswordStrength:
    """Оценка пароля для индикатора под полем: 1..3 полоски."""
    score = 0
    if len(password) >= 8:
        score += 1
    if re.search(r"[a-z]", password) and re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"\d", password):
        score += 1
    if SYMBOLS_RE.search(password):
        score += 1

    if score <= 1:
        return PasswordStrength(bars=1, label="Weak", color="red")
    if score <= 3:
        return PasswordStrength(bars=2, label="Medium", color="yellow")
    return PasswordStrength(bars=3, label="Strong", color="green")
