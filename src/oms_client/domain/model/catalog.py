"""ProductCatalog: an immutable snapshot of the products on offer.

A new catalog is built on every fetch; catalogs are replaced, never
merged, so staleness is bounded by the refetch interval.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from oms_client.domain.model.product import Product


class ProductCatalog:

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_ref = {p.ref: p for p in self._products}

    def find(self, product_ref: object) -> Product | None:
        """Resolve a user-entered reference by identifier.

        References are compared in text form, so ``"7"`` matches a product
        whose id came off the wire as the number 7.
        """
        if product_ref is None:
            return None
        return self._by_ref.get(str(product_ref).strip())

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def is_empty(self) -> bool:
        return not self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)
