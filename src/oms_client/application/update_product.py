"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from oms_client.domain.exceptions import EntityNotFoundError, ValidationError
from oms_client.domain.model.product import Product, ProductDetails
from oms_client.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        *,
        sku: str | None = None,
        name: str | None = None,
        price: str | None = None,
        quantity: str | int | None = None,
        description: str | None = None,
        category: str | None = None,
    ) -> Product:
        """Change the given fields of a product; the rest keep their values.

        The back end replaces a product whole, so the current record is
        fetched first and the edits are laid over it. Orders already
        placed keep the price they were submitted with.
        """
        changes = {
            "sku": sku,
            "name": name,
            "price": price,
            "quantity": quantity,
            "description": description,
            "category": category,
        }
        edited = {k: v for k, v in changes.items() if v is not None}
        if not edited:
            raise ValidationError("Nothing to update")

        current = self._product_repo.get_by_id(product_id)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        merged = {
            "sku": current.sku or "",
            "name": current.name,
            "price": current.unit_price.amount,
            "quantity": current.available_quantity,
            "description": current.description,
            "category": current.category,
        }
        merged.update(edited)

        product = self._product_repo.update(product_id, ProductDetails.of(**merged))
        log.info("product.updated", product_id=product.id, fields=sorted(edited))
        return product
