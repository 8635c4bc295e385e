"""Application service: Show History use case (query).

The back end offers one filter at a time: by product or by action.
"""

from __future__ import annotations

from oms_client.application.dto import HistoryEntryDTO
from oms_client.domain.exceptions import ValidationError
from oms_client.domain.model.history import HISTORY_ACTIONS
from oms_client.domain.repository.history_repository import HistoryRepository

FETCH_ERROR = "Error fetching history. Please try again."


class ShowHistoryHandler:

    def __init__(self, history_repo: HistoryRepository) -> None:
        self._history_repo = history_repo

    def handle(
        self, product_id: str | None = None, action: str | None = None
    ) -> list[HistoryEntryDTO]:
        if product_id and action:
            raise ValidationError("Filter by product or by action, not both")

        if product_id:
            entries = self._history_repo.list_for_product(product_id.strip())
        elif action:
            normalized = action.strip().upper()
            if normalized not in HISTORY_ACTIONS:
                raise ValidationError(
                    f"Unknown action '{action}'; expected one of {', '.join(HISTORY_ACTIONS)}"
                )
            entries = self._history_repo.list_for_action(normalized)
        else:
            entries = self._history_repo.list_all()

        return [HistoryEntryDTO.from_entry(entry) for entry in entries]
