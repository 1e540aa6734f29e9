from .auth import LoginRequest, AuthResponse
from .user import Gender, RegisterRequest
from .common import ErrorBody, PasswordStrength
from .forms import FieldErrors, SignInFormData, SignUpFormData

__all__ = [
    "LoginRequest",
    "AuthResponse",
    "Gender",
    "RegisterRequest",
    "ErrorBody",
    "PasswordStrength",
    "FieldErrors",
    "SignInFormData",
    "SignUpFormData",
]
