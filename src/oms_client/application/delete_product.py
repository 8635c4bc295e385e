"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from oms_client.domain.exceptions import ValidationError
from oms_client.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)

DELETED_MESSAGE = "Product deleted successfully"


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> str:
        """Delete a product; the back end refuses if orders reference it."""
        if not product_id or not str(product_id).strip():
            raise ValidationError("Product ID is required")
        message = self._product_repo.delete(str(product_id).strip())
        log.info("product.deleted", product_id=product_id)
        return message or DELETED_MESSAGE
