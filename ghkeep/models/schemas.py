"""Pydantic schemas for API validation and serialization."""

from pydantic import BaseModel, ConfigDict, Field


# Request schemas
#
# Fields default to "" so that a missing field is reported by the credential
# validator ("Email is required") instead of a generic schema error.
class LoginRequest(BaseModel):
    """Body of POST /api/auth/login."""

    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    """Body of POST /api/auth/register."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = ""
    email: str = ""
    password: str = ""
    github_key: str = Field(default="", alias="githubKey")


# Response schemas
class UserRead(BaseModel):
    """Public view of an account. The password is never serialized."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    username: str
    email: str
    github_key: str = Field(alias="githubKey")


class AuthResponse(BaseModel):
    """Successful login/register response."""

    user: UserRead


class ErrorPayload(BaseModel):
    """Error body of a failed auth request.

    Only `message` matters to the client; other servers or proxies may send it
    without a code or field errors.
    """

    message: str | None = None
    code: str | None = None
    errors: dict[str, str] = Field(default_factory=dict)
