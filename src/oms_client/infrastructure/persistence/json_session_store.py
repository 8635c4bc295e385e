"""JSON-file-backed implementation of SessionStore."""

from __future__ import annotations

import json
import os
from pathlib import Path

from oms_client.domain.repository.session_store import SessionStore


class JsonSessionStore(SessionStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SessionStore interface -----------------------------------------------

    def load(self) -> dict | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except ValueError:
            return None
        return raw if isinstance(raw, dict) else None

    def save(self, record: dict) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # an existing file keeps its old mode through O_CREAT
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(record, indent=2) + "\n")

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)
