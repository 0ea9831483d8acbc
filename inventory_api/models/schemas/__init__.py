"""Pydantic schemas for the authentication API."""
from .auth import (
    LoginOut,
    LoginRequest,
    MessageOut,
    ProfileOut,
    RegisterOut,
    RegisterRequest,
    TokenRefreshOut,
    UserOut,
)

__all__ = [
    "LoginOut",
    "LoginRequest",
    "MessageOut",
    "ProfileOut",
    "RegisterOut",
    "RegisterRequest",
    "TokenRefreshOut",
    "UserOut",
]
