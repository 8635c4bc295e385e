"""Order: a confirmed order as recorded by the back end.

The client never builds these itself: they come back from
``POST /api/orders`` and ``GET /api/orders``. Status is free text
assigned by the server (new orders start as PENDING).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from oms_client.domain.model.value_objects import Money

PENDING = "PENDING"


@dataclass(frozen=True)
class OrderLineItem:
    """A line of a confirmed order, with the price locked at submission."""

    product_id: int | str | None
    product_name: str | None
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class Order:

    id: int | str
    order_number: str | None
    status: str
    total_amount: Money
    order_date: datetime | None = None
    items: tuple[OrderLineItem, ...] = field(default_factory=tuple)

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING

    @property
    def item_count(self) -> int:
        return len(self.items)
