"""REST-backed implementation of OrderRepository."""

from __future__ import annotations

from oms_client.domain.exceptions import BackendError
from oms_client.domain.model.order import PENDING, Order, OrderLineItem
from oms_client.domain.model.submission import SubmissionRequest
from oms_client.domain.model.value_objects import Money
from oms_client.domain.repository.order_repository import OrderRepository
from oms_client.infrastructure.http.api_client import ApiClient
from oms_client.infrastructure.http.timestamps import parse_timestamp


class HttpOrderRepository(OrderRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        raw = self._api.get("/api/orders")
        if not isinstance(raw, list):
            raise BackendError("Unexpected order list from the back end")
        return [self._to_domain(order) for order in raw]

    def submit(self, request: SubmissionRequest) -> Order:
        raw = self._api.post("/api/orders", request.to_wire())
        if not isinstance(raw, dict):
            raise BackendError("Unexpected order from the back end")
        return self._to_domain(raw)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = []
        for i in raw.get("orderItems") or []:
            product = i.get("product") or {}
            quantity = int(i.get("quantity") or 0)
            unit_price = Money.of(i.get("unitPrice") or 0)
            if i.get("totalPrice") is not None:
                line_total = Money.of(i["totalPrice"])
            else:
                line_total = Money(unit_price.amount * quantity)
            items.append(
                OrderLineItem(
                    product_id=product.get("id"),
                    product_name=product.get("name"),
                    quantity=quantity,
                    unit_price=unit_price,
                    line_total=line_total,
                )
            )
        return Order(
            id=raw["id"],
            order_number=raw.get("orderNumber"),
            status=raw.get("status") or PENDING,
            total_amount=Money.of(raw.get("totalAmount") or 0),
            order_date=parse_timestamp(raw.get("orderDate")),
            items=tuple(items),
        )

