"""User model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ghkeep.constants import (
    EMAIL_MAX_LENGTH,
    GITHUB_KEY_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from ghkeep.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """An account, uniquely identified by its email."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(USERNAME_MAX_LENGTH))
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), unique=True, index=True)
    # Stored as submitted; hashing is handled outside this service
    password: Mapped[str] = mapped_column(String(PASSWORD_MAX_LENGTH))
    github_key: Mapped[str] = mapped_column(String(GITHUB_KEY_MAX_LENGTH))

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
