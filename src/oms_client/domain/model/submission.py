"""SubmissionRequest: the payload for one order-submission attempt.

Built fresh from a DraftOrder and a ProductCatalog at submit time and
never mutated afterwards, so edits made to the draft while a request is
in flight cannot leak into it.
"""

from __future__ import annotations

from dataclasses import dataclass

from oms_client.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class SubmissionLine:
    """One confirmed line: product id, quantity, unit price at submit time."""

    product_id: int | str
    quantity: Quantity
    unit_price: Money  # captured from the catalog, not re-checked against stock

    def to_wire(self) -> dict:
        return {
            "product": {"id": self.product_id},
            "quantity": self.quantity.value,
            "unitPrice": self.unit_price.to_wire(),
        }


@dataclass(frozen=True)
class SubmissionRequest:

    lines: tuple[SubmissionLine, ...]

    def to_wire(self) -> dict:
        """Body for ``POST /api/orders``."""
        return {"orderItems": [line.to_wire() for line in self.lines]}
