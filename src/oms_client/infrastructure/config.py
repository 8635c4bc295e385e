"""Client settings: CLI flags, env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``OMS_CLIENT_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_SESSION_FILE = Path.home() / ".oms-client" / "session.json"


class ClientSettings(BaseSettings):
    """Settings for the order client.

    Attributes:
        api_base_url: Root URL of the back end; ``/api/...`` paths are
            appended to it.
        timeout_seconds: Per-request timeout for every back-end call.
        session_file: Where the login token is kept between invocations.
        verbose: DEBUG-level logging for the ``oms_client`` logger.
        log_json: JSON log lines instead of the console renderer.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OMS_CLIENT_",
    }

    api_base_url: str = "http://localhost:8080"
    timeout_seconds: float = Field(default=10.0, gt=0)
    session_file: Path = DEFAULT_SESSION_FILE
    verbose: bool = False
    log_json: bool = False

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ClientSettings:
        """Build settings, letting only flags the user actually gave override."""
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})
