"""HTTP client for the auth endpoints."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ghkeep.client.errors import AuthRequestError
from ghkeep.constants import HTTPX_TIMEOUT
from ghkeep.models.schemas import AuthResponse, ErrorPayload, UserRead

logger = logging.getLogger(__name__)


class AuthApi:
    """Thin async wrapper around POST /api/auth/{login,register,logout}.

    Every failure surfaces as AuthRequestError. Pass `client` to reuse an
    existing httpx.AsyncClient (its base_url is used as-is); otherwise one is
    created for `base_url` and closed by `aclose()`.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = HTTPX_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def login(self, email: str, password: str) -> UserRead:
        data = await self._post("/api/auth/login", {"email": email, "password": password})
        return self._parse_user(data)

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        github_key: str,
    ) -> UserRead:
        data = await self._post(
            "/api/auth/register",
            {
                "username": username,
                "email": email,
                "password": password,
                "githubKey": github_key,
            },
        )
        return self._parse_user(data)

    async def logout(self) -> None:
        await self._post("/api/auth/logout", {})

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        try:
            response = await self.client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"POST {path} failed: {e!r}")
            raise AuthRequestError(str(e) or None) from e

        if response.is_error:
            raise self._error_from_response(response)

        try:
            return response.json()
        except ValueError as e:
            raise AuthRequestError(
                "Malformed response from server", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_from_response(response: httpx.Response) -> AuthRequestError:
        message = f"Request failed with status code {response.status_code}"
        try:
            payload = ErrorPayload.model_validate(response.json())
        except (ValueError, ValidationError):
            # Not our error shape (proxy page, empty body...)
            return AuthRequestError(message, status_code=response.status_code)
        return AuthRequestError(
            message,
            server_message=payload.message or None,
            status_code=response.status_code,
            field_errors=payload.errors,
        )

    @staticmethod
    def _parse_user(data: Any) -> UserRead:
        try:
            return AuthResponse.model_validate(data).user
        except ValidationError as e:
            raise AuthRequestError("Malformed response from server") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "AuthApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
