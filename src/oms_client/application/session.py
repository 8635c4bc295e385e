"""Session: process-wide credential state.

One Session is created by the composition root and injected wherever a
request needs signing. Its transitions are explicit:

- ``login()`` initialises it after the back end issued a token
- ``logout()`` tears it down on user request
- ``invalidate()`` tears it down when the back end answers 401
"""

from __future__ import annotations

import structlog

from oms_client.domain.repository.session_store import SessionStore

log = structlog.get_logger(__name__)


class Session:

    def __init__(self, store: SessionStore | None = None) -> None:
        self._store = store
        self._token: str | None = None
        self._username: str | None = None
        if store is not None:
            record = store.load()
            if record and record.get("token"):
                self._token = record["token"]
                self._username = record.get("username")

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def login(self, token: str, username: str | None = None) -> None:
        self._token = token
        self._username = username
        if self._store is not None:
            self._store.save({"token": token, "username": username})
        log.info("session.login", username=username)

    def logout(self) -> None:
        self._teardown()
        log.info("session.logout")

    def invalidate(self) -> None:
        """Drop credentials the back end no longer accepts."""
        self._teardown()
        log.warning("session.invalidated")

    def _teardown(self) -> None:
        self._token = None
        self._username = None
        if self._store is not None:
            self._store.clear()
