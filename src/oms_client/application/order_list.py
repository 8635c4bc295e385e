"""OrderListView: the user's confirmed orders, as last fetched.

Refreshed on view entry and once after every successful submission.
A refresh replaces the list; if it fails the previous list is kept and
``error`` says why.
"""

from __future__ import annotations

import structlog

from oms_client.application.dto import OrderDTO
from oms_client.domain.exceptions import BackendError, SessionExpiredError
from oms_client.domain.repository.order_repository import OrderRepository

log = structlog.get_logger(__name__)

FETCH_ERROR = "Error fetching orders. Please try again."


class OrderListView:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self.orders: list[OrderDTO] = []
        self.error: str | None = None

    def refresh(self) -> list[OrderDTO]:
        self.error = None
        try:
            orders = self._order_repo.list_all()
        except SessionExpiredError:
            raise
        except BackendError as exc:
            self.error = exc.message or FETCH_ERROR
            log.error("orders.refresh_failed", status_code=exc.status_code, error=self.error)
            return self.orders

        self.orders = [OrderDTO.from_order(order) for order in orders]
        log.debug("orders.refreshed", count=len(self.orders))
        return self.orders
