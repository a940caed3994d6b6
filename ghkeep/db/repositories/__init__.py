"""User repositories."""

from ghkeep.db.repositories.base import UserRepository
from ghkeep.db.repositories.memory import InMemoryUserRepository
from ghkeep.db.repositories.sql import SqlAlchemyUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "SqlAlchemyUserRepository",
]
