"""Unit tests for the confirmed Order read model and the submission payload."""

from decimal import Decimal

import pytest

from oms_client.domain.model.order import Order, OrderLineItem
from oms_client.domain.model.submission import SubmissionLine, SubmissionRequest
from oms_client.domain.model.value_objects import Money, Quantity


def _order(status: str = "PENDING", lines: int = 2) -> Order:
    items = tuple(
        OrderLineItem(
            product_id=i,
            product_name=f"Item {i}",
            quantity=1,
            unit_price=Money.of("5.00"),
            line_total=Money.of("5.00"),
        )
        for i in range(lines)
    )
    return Order(
        id=1,
        order_number="ORD-1",
        status=status,
        total_amount=Money(Decimal("5.00") * lines),
        items=items,
    )


class TestOrder:

    def test_item_count(self):
        assert _order(lines=3).item_count == 3

    def test_pending(self):
        assert _order().is_pending
        assert not _order(status="DELIVERED").is_pending

    def test_frozen(self):
        with pytest.raises(Exception):
            _order().status = "CANCELLED"  # type: ignore[misc]


class TestSubmissionRequest:

    def test_wire_shape(self):
        request = SubmissionRequest(lines=(
            SubmissionLine(1, Quantity(2), Money.of("9.99")),
            SubmissionLine(2, Quantity(1), Money.of("0.50")),
        ))
        assert request.to_wire() == {
            "orderItems": [
                {"product": {"id": 1}, "quantity": 2, "unitPrice": 9.99},
                {"product": {"id": 2}, "quantity": 1, "unitPrice": 0.5},
            ]
        }

    def test_immutable(self):
        request = SubmissionRequest(lines=(SubmissionLine(1, Quantity(1), Money.of("1")),))
        with pytest.raises(Exception):
            request.lines = ()  # type: ignore[misc]
