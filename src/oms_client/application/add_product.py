"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from oms_client.domain.model.product import Product, ProductDetails
from oms_client.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        sku: str,
        name: str,
        price: str,
        quantity: str | int,
        description: str | None = None,
        category: str | None = None,
    ) -> Product:
        """Create a product. SKU uniqueness is checked by the back end."""
        details = ProductDetails.of(sku, name, price, quantity, description, category)
        product = self._product_repo.create(details)
        log.info("product.created", product_id=product.id, sku=details.sku)
        return product
