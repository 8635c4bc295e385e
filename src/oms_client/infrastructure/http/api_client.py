"""Thin JSON-over-HTTP client for the back end's REST API.

Every request is signed with the injected Session's bearer token. The
client maps transport results onto the domain's error taxonomy:

- connection errors and timeouts  -> BackendError (no diagnostic)
- 401                             -> Session.invalidate(), SessionExpiredError
- any other non-2xx               -> BackendError carrying the body text
"""

from __future__ import annotations

import json
from typing import Any

import requests
import structlog

from oms_client.application.session import Session
from oms_client.domain.exceptions import BackendError, SessionExpiredError

log = structlog.get_logger(__name__)


class ApiClient:

    def __init__(
        self,
        base_url: str,
        session: Session,
        timeout: float = 10.0,
        http: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = timeout
        self._http = http or requests.Session()

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, payload: dict) -> Any:
        return self._request("POST", path, payload)

    def put(self, path: str, payload: dict) -> Any:
        return self._request("PUT", path, payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, path: str, payload: dict | None = None) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = {"Accept": "application/json"}
        if self._session.token:
            headers["Authorization"] = f"Bearer {self._session.token}"

        log.debug("http.request", method=method, url=url)
        try:
            response = self._http.request(
                method, url, json=payload, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as exc:
            log.error("http.transport_error", method=method, url=url, error=str(exc))
            raise BackendError(None) from exc

        log.debug("http.response", method=method, url=url, status_code=response.status_code)

        if response.status_code == 401:
            self._session.invalidate()
            raise SessionExpiredError()
        if not response.ok:
            raise BackendError(diagnostic_text(response), response.status_code)
        return _decode(response)


def diagnostic_text(response: requests.Response) -> str | None:
    """The error body as the user should see it, or None if there is none.

    A JSON string body is unwrapped; a JSON object or array is shown as
    compact JSON; anything else is passed through as plain text.
    """
    text = response.text.strip()
    if not text:
        return None
    try:
        body = json.loads(text)
    except ValueError:
        return text
    if isinstance(body, str):
        return body or None
    return json.dumps(body, separators=(",", ":"))


def _decode(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
