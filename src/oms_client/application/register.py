"""Application service: Register use case."""

from __future__ import annotations

from oms_client.domain.exceptions import ValidationError
from oms_client.domain.repository.auth_repository import AuthRepository


class RegisterHandler:

    def __init__(self, auth_repo: AuthRepository) -> None:
        self._auth_repo = auth_repo

    def handle(self, username: str, password: str, email: str, full_name: str) -> str:
        """Create an account. Does not log in; the user signs in afterwards."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")
        return self._auth_repo.register(
            username.strip(), password, email.strip(), full_name.strip()
        )
