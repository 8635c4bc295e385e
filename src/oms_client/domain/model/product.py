"""Product read model and the editable product fields.

Products are owned by the back end. The order view only ever sees a
snapshot of them, fetched each time it is entered. Changes go through
``ProductDetails``: the full set of fields the back end stores for a
product, sent whole on create and on update.
"""

from __future__ import annotations

from dataclasses import dataclass

from oms_client.domain.exceptions import ValidationError
from oms_client.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Product:
    """A product as listed by the back end."""

    id: int | str
    name: str
    unit_price: Money
    available_quantity: int
    sku: str | None = None
    category: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if self.available_quantity < 0:
            raise ValidationError(
                f"Available quantity for {self.name} cannot be negative"
            )

    @property
    def ref(self) -> str:
        """The textual identifier a user would enter or pick."""
        return str(self.id)


@dataclass(frozen=True)
class ProductDetails:
    """Fields for creating or replacing a product.

    SKU and name are required; price and stock must both be positive.
    Optional text fields are stored as None when left blank.
    """

    sku: str
    name: str
    price: Money
    quantity: Quantity
    description: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if not self.sku or not self.sku.strip():
            raise ValidationError("SKU is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount <= 0:
            raise ValidationError("Price must be greater than zero")

    @staticmethod
    def of(
        sku: str,
        name: str,
        price: object,
        quantity: object,
        description: str | None = None,
        category: str | None = None,
    ) -> ProductDetails:
        """Build from raw form input, stripping text and parsing numbers."""
        parsed_quantity = Quantity.parse(quantity)
        if parsed_quantity is None:
            raise ValidationError(f"Quantity must be a positive whole number, got {quantity!r}")
        return ProductDetails(
            sku=(sku or "").strip(),
            name=(name or "").strip(),
            price=Money.of(price),
            quantity=parsed_quantity,
            description=_blank_to_none(description),
            category=_blank_to_none(category),
        )

    def to_wire(self) -> dict:
        return {
            "sku": self.sku,
            "name": self.name,
            "description": self.description,
            "price": self.price.to_wire(),
            "quantity": self.quantity.value,
            "category": self.category,
        }


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()
