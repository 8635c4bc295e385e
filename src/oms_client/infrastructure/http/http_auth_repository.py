"""REST-backed implementation of AuthRepository."""

from __future__ import annotations

from oms_client.domain.exceptions import BackendError
from oms_client.domain.repository.auth_repository import AuthRepository
from oms_client.infrastructure.http.api_client import ApiClient


class HttpAuthRepository(AuthRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def login(self, username: str, password: str) -> tuple[str, dict]:
        raw = self._api.post(
            "/api/auth/login", {"username": username, "password": password}
        )
        if not isinstance(raw, dict) or not raw.get("token"):
            raise BackendError("Login response did not include a token")
        return raw["token"], raw.get("user") or {}

    def register(self, username: str, password: str, email: str, full_name: str) -> str:
        raw = self._api.post(
            "/api/auth/register",
            {
                "username": username,
                "password": password,
                "email": email,
                "fullName": full_name,
            },
        )
        return raw if isinstance(raw, str) else "User registered successfully"
