"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ghkeep.auth.service import AuthService
from ghkeep.db import get_db
from ghkeep.db.repositories import SqlAlchemyUserRepository, UserRepository
from ghkeep.models.user import User


def get_user_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """Repository bound to the request's database session."""
    return SqlAlchemyUserRepository(db)


def get_auth_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> AuthService:
    return AuthService(repository)


async def get_optional_user(
    request: Request,
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> User | None:
    """Get current user from session if logged in."""
    user_id = request.session.get("user_id")
    if not user_id:
        return None

    user = await repository.find_by_id(user_id)

    # If user_id in session but user doesn't exist in DB, clear stale session
    if not user:
        request.session.clear()

    return user


async def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Get current user, raising 401 if not authenticated."""
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
