"""REST-backed implementation of ProductRepository."""

from __future__ import annotations

from urllib.parse import quote

from oms_client.domain.exceptions import BackendError
from oms_client.domain.model.product import Product, ProductDetails
from oms_client.domain.model.value_objects import Money
from oms_client.domain.repository.product_repository import ProductRepository
from oms_client.infrastructure.http.api_client import ApiClient

NOT_FOUND = 404


class HttpProductRepository(ProductRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        raw = self._api.get("/api/products")
        if not isinstance(raw, list):
            raise BackendError("Unexpected product list from the back end")
        return [self._to_domain(item) for item in raw]

    def get_by_id(self, product_id: str) -> Product | None:
        try:
            raw = self._api.get(_product_path(product_id))
        except BackendError as exc:
            if exc.status_code == NOT_FOUND:
                return None
            raise
        return self._to_domain(self._expect_object(raw))

    def create(self, details: ProductDetails) -> Product:
        raw = self._api.post("/api/products", details.to_wire())
        return self._to_domain(self._expect_object(raw))

    def update(self, product_id: str, details: ProductDetails) -> Product:
        raw = self._api.put(_product_path(product_id), details.to_wire())
        return self._to_domain(self._expect_object(raw))

    def delete(self, product_id: str) -> str:
        raw = self._api.delete(_product_path(product_id))
        return raw if isinstance(raw, str) else ""

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _expect_object(raw: object) -> dict:
        if not isinstance(raw, dict):
            raise BackendError("Unexpected product from the back end")
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw.get("name") or "",
            unit_price=Money.of(raw["price"]),
            available_quantity=int(raw.get("quantity") or 0),
            sku=raw.get("sku"),
            category=raw.get("category"),
            description=raw.get("description"),
        )


def _product_path(product_id: str) -> str:
    return f"/api/products/{quote(str(product_id), safe='')}"
