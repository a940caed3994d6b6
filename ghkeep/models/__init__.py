"""SQLAlchemy models."""

from ghkeep.models.base import Base
from ghkeep.models.user import User

__all__ = [
    "Base",
    "User",
]
