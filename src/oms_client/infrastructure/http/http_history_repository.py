"""REST-backed implementation of HistoryRepository."""

from __future__ import annotations

from urllib.parse import quote

from oms_client.domain.exceptions import BackendError, EntityNotFoundError
from oms_client.domain.model.history import HistoryEntry
from oms_client.domain.repository.history_repository import HistoryRepository
from oms_client.infrastructure.http.api_client import ApiClient
from oms_client.infrastructure.http.timestamps import parse_timestamp

NOT_FOUND = 404


class HttpHistoryRepository(HistoryRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    # --- HistoryRepository interface ------------------------------------------

    def list_all(self) -> list[HistoryEntry]:
        return self._fetch("/api/history")

    def list_for_product(self, product_id: str) -> list[HistoryEntry]:
        try:
            return self._fetch(f"/api/history/product/{quote(product_id, safe='')}")
        except BackendError as exc:
            if exc.status_code == NOT_FOUND:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found") from exc
            raise

    def list_for_action(self, action: str) -> list[HistoryEntry]:
        return self._fetch(f"/api/history/action/{quote(action, safe='')}")

    # --- Serialization --------------------------------------------------------

    def _fetch(self, path: str) -> list[HistoryEntry]:
        raw = self._api.get(path)
        if not isinstance(raw, list):
            raise BackendError("Unexpected history list from the back end")
        return [self._to_domain(entry) for entry in raw]

    @staticmethod
    def _to_domain(raw: dict) -> HistoryEntry:
        return HistoryEntry(
            id=raw["id"],
            action=raw.get("action") or "",
            previous_quantity=raw.get("previousQuantity"),
            new_quantity=raw.get("newQuantity"),
            description=raw.get("description"),
            created_at=parse_timestamp(raw.get("createdAt")),
        )
