"""Abstract repository for the inventory history log."""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms_client.domain.model.history import HistoryEntry


class HistoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[HistoryEntry]:
        """Every entry for the current user, newest first."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[HistoryEntry]:
        """Entries for one product.

        Raises EntityNotFoundError if the product does not exist.
        """

    @abstractmethod
    def list_for_action(self, action: str) -> list[HistoryEntry]:
        """Entries with one action (ADD, UPDATE, DELETE or ORDER)."""
