"""SQLAlchemy user repository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ghkeep.auth.errors import StorageFailure
from ghkeep.db.repositories.base import UserRepository
from ghkeep.models.user import User

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class SqlAlchemyUserRepository(UserRepository):
    """Repository over an AsyncSession.

    `save` is a single INSERT ... ON CONFLICT (email) DO UPDATE ... RETURNING
    statement, so concurrent registrations for one email can't produce two
    rows. Committing is left to the session owner (see `get_db`).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: str) -> User | None:
        try:
            result = await self.session.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            logger.error(f"User lookup by email failed: {e}")
            raise StorageFailure() from e
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: int) -> User | None:
        try:
            return await self.session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup by id failed: {e}")
            raise StorageFailure() from e

    async def save(self, user: User) -> User:
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise StorageFailure(f"Upsert not supported for dialect {dialect!r}")

        stmt = insert(User).values(
            username=user.username,
            email=user.email,
            password=user.password,
            github_key=user.github_key,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.email],
            set_={
                "username": stmt.excluded.username,
                "password": stmt.excluded.password,
                "github_key": stmt.excluded.github_key,
                "updated_at": func.now(),
            },
        )

        try:
            result = await self.session.scalars(
                stmt.returning(User),
                execution_options={"populate_existing": True},
            )
            return result.one()
        except SQLAlchemyError as e:
            logger.error(f"User upsert failed: {e}")
            raise StorageFailure() from e
