"""Authentication request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from tabula.validation.fields import EMAIL_PATTERN


class CredentialsRequest(BaseModel):
    """Request payload for the login endpoint."""

    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=72)


class RegisterRequest(CredentialsRequest):
    """Request payload for the register endpoint."""

    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        value = value.strip().lower()
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError("must be a valid email address")
        return value


class CurrentUserResponse(BaseModel):
    """Authenticated user profile."""

    id: int
    email: str
    is_active: bool
    created_at: datetime
    last_login_at: datetime | None = None

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    """Bearer access token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., ge=1)
    user: CurrentUserResponse
