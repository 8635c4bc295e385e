"""Application service: Log In use case."""

from __future__ import annotations

from oms_client.application.session import Session
from oms_client.domain.exceptions import ValidationError
from oms_client.domain.repository.auth_repository import AuthRepository


class LoginHandler:

    def __init__(self, auth_repo: AuthRepository, session: Session) -> None:
        self._auth_repo = auth_repo
        self._session = session

    def handle(self, username: str, password: str) -> dict:
        """Authenticate and start a session. Returns the user record."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")

        token, user = self._auth_repo.login(username.strip(), password)
        self._session.login(token, user.get("username", username.strip()))
        return user
