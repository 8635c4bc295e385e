"""Abstract storage for the persisted login session."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SessionStore(ABC):

    @abstractmethod
    def load(self) -> dict | None:
        """Return the saved ``{"token", "username"}`` record, or None."""

    @abstractmethod
    def save(self, record: dict) -> None:
        """Persist the session record, replacing any previous one."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the saved session."""
