"""Authentication endpoints for registration, login and current-user introspection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tabula.api.deps import get_current_user, get_db
from tabula.api.schemas.auth import (
    CredentialsRequest,
    CurrentUserResponse,
    RegisterRequest,
    TokenResponse,
)
from tabula.core.config import settings
from tabula.core.logging import get_logger
from tabula.core.security import create_access_token
from tabula.db.models.user import User
from tabula.repositories import users as user_repository

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = get_logger(__name__)


def _issue_token(user: User) -> TokenResponse:
    access_token = create_access_token({"sub": str(user.id), "email": user.email})
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user=CurrentUserResponse.model_validate(user),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)) -> TokenResponse:
    """Create an account and issue an access token."""
    if await user_repository.get_user_by_email(db, payload.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An account with this email already exists",
        )

    user = await user_repository.create_user(db, email=payload.email, password=payload.password)
    logger.info("User registered", user_id=user.id)
    return _issue_token(user)


@router.post("/login", response_model=TokenResponse)
async def login(payload: CredentialsRequest, db: AsyncSession = Depends(get_db)) -> TokenResponse:
    """Authenticate a user and issue an access token."""
    user = await user_repository.authenticate_user(
        db,
        email=payload.email,
        password=payload.password,
    )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user = await user_repository.record_login(db, user)
    return _issue_token(user)


@router.get("/me", response_model=CurrentUserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)) -> CurrentUserResponse:
    """Return the currently authenticated active user."""
    return CurrentUserResponse.model_validate(current_user)
