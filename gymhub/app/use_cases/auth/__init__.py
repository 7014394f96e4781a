"""
Authentication Use Cases

All authentication-related business logic.
"""

from .dtos import AuthResponse, SignOutResponse, SignupCommand
from .login_use_case import LoginUseCase
from .sign_out_use_case import SignOutUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "SignOutUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "AuthResponse",
    "SignOutResponse",
]
