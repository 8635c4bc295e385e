"""Display-ready views of products and orders.

Money is pre-formatted and optional fields are flattened to text, so the
CLI tables never touch domain value objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from oms_client.domain.model.history import HistoryEntry
from oms_client.domain.model.order import Order
from oms_client.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: one catalog entry as offered to the user."""

    id: str
    name: str
    unit_price: str  # formatted, e.g. "$9.99"
    available: int
    sku: str
    category: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.ref,
            name=product.name,
            unit_price=str(product.unit_price),
            available=product.available_quantity,
            sku=product.sku or "",
            category=product.category or "",
        )


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a confirmed order as displayed to the user."""

    id: str
    order_number: str
    order_date: str
    status: str
    total: str
    item_count: int
    items: list[OrderLineItemDTO]

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=str(order.id),
            order_number=order.order_number or "",
            order_date=order.order_date.strftime("%Y-%m-%d") if order.order_date else "",
            status=order.status,
            total=str(order.total_amount),
            item_count=order.item_count,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name or str(item.product_id),
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
        )


@dataclass(frozen=True)
class HistoryEntryDTO:
    """Output: one line of the inventory history log."""

    date: str
    action: str
    previous_quantity: str  # "N/A" when the back end left it empty
    new_quantity: str
    description: str

    @staticmethod
    def from_entry(entry: HistoryEntry) -> HistoryEntryDTO:
        return HistoryEntryDTO(
            date=entry.created_at.strftime("%Y-%m-%d %H:%M") if entry.created_at else "",
            action=entry.action,
            previous_quantity=_or_na(entry.previous_quantity),
            new_quantity=_or_na(entry.new_quantity),
            description=entry.description or "",
        )


@dataclass(frozen=True)
class DashboardDTO:
    """Output: headline numbers for the dashboard."""

    total_products: int
    total_orders: int
    low_stock_products: int
    recent_orders: list[OrderDTO]


def _or_na(value: int | None) -> str:
    return "N/A" if value is None else str(value)
