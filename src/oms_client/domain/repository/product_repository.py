"""Abstract repository for products.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the back end's
REST API and lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oms_client.domain.model.product import Product, ProductDetails


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product currently on offer."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return one product, or None if the back end does not know it."""

    @abstractmethod
    def create(self, details: ProductDetails) -> Product:
        """Create a product and return it as the back end stored it."""

    @abstractmethod
    def update(self, product_id: str, details: ProductDetails) -> Product:
        """Replace every field of an existing product."""

    @abstractmethod
    def delete(self, product_id: str) -> str:
        """Delete a product. Returns the back end's confirmation text."""
