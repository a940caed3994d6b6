"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ghkeep.auth.dependencies import get_auth_service, get_current_user
from ghkeep.auth.errors import StorageFailure
from ghkeep.auth.service import AuthService
from ghkeep.db import get_db
from ghkeep.models.schemas import AuthResponse, LoginRequest, RegisterRequest, UserRead
from ghkeep.models.user import User

router = APIRouter()
logger = logging.getLogger(__name__)


def _start_session(request: Request, user: User) -> AuthResponse:
    """Remember the user in the signed session cookie and build the response."""
    request.session["user_id"] = user.id
    return AuthResponse(user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: Request,
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Log in with email and password."""
    user = await service.login(body.email, body.password)
    return _start_session(request, user)


@router.post("/register", response_model=AuthResponse)
async def register(
    request: Request,
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuthResponse:
    """Create an account, or overwrite the one registered with this email."""
    user = await service.register(
        username=body.username,
        email=body.email,
        password=body.password,
        github_key=body.github_key,
    )
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Commit after register failed: {e}")
        raise StorageFailure() from e
    return _start_session(request, user)


@router.post("/logout")
async def logout(request: Request) -> dict:
    """Log out the current user."""
    request.session.clear()
    return {"message": "Logged out"}


@router.get("/me", response_model=AuthResponse)
async def get_me(user: Annotated[User, Depends(get_current_user)]) -> AuthResponse:
    """Get current authenticated user."""
    return AuthResponse(user=UserRead.model_validate(user))
