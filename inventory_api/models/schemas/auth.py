"""Authentication-related schemas."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class _EmailPayload(BaseModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class RegisterRequest(_EmailPayload):
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(_EmailPayload):
    password: str = Field(..., min_length=1, max_length=72)


class MessageOut(BaseModel):
    message: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: dt.datetime | None = None


class RegisterOut(BaseModel):
    message: str = "User created successfully"
    user: UserOut


class LoginOut(BaseModel):
    message: str = "Login successful"
    token: str
    user: UserOut


class ProfileOut(BaseModel):
    user: UserOut


class TokenRefreshOut(BaseModel):
    message: str = "Token refreshed successfully"
    token: str
