"""Abstract repository for the back end's authentication endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthRepository(ABC):

    @abstractmethod
    def login(self, username: str, password: str) -> tuple[str, dict]:
        """Exchange credentials for ``(bearer_token, user_record)``."""

    @abstractmethod
    def register(self, username: str, password: str, email: str, full_name: str) -> str:
        """Create an account and return the server's confirmation text."""
