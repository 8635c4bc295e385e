"""Abstract repository for confirmed orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms_client.domain.model.order import Order
from oms_client.domain.model.submission import SubmissionRequest


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return the current user's confirmed orders."""

    @abstractmethod
    def submit(self, request: SubmissionRequest) -> Order:
        """Send one submission attempt and return the order the back end created.

        Raises BackendError on rejection or transport failure.
        """
