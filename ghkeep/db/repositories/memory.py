"""In-memory user repository, used by the client tests and local tooling."""

import asyncio
import itertools

from ghkeep.db.repositories.base import UserRepository
from ghkeep.models.user import User


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository.

    Records are copied in and out so callers can't mutate stored state
    without going through `save`.
    """

    def __init__(self) -> None:
        self._by_email: dict[str, User] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    @staticmethod
    def _copy(user: User) -> User:
        return User(
            id=user.id,
            username=user.username,
            email=user.email,
            password=user.password,
            github_key=user.github_key,
        )

    async def find_by_email(self, email: str) -> User | None:
        user = self._by_email.get(email)
        return self._copy(user) if user else None

    async def find_by_id(self, user_id: int) -> User | None:
        for user in self._by_email.values():
            if user.id == user_id:
                return self._copy(user)
        return None

    async def save(self, user: User) -> User:
        async with self._lock:
            stored = self._by_email.get(user.email)
            if stored is None:
                stored = self._copy(user)
                stored.id = next(self._ids)
                self._by_email[stored.email] = stored
            else:
                stored.username = user.username
                stored.password = user.password
                stored.github_key = user.github_key
            return self._copy(stored)

    def __len__(self) -> int:
        return len(self._by_email)
