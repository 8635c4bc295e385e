"""Application service: Load Catalog use case (query).

Called on every view activation. Each call builds a brand-new
ProductCatalog from the back end; nothing is merged with what was
loaded before.
"""

from __future__ import annotations

from oms_client.domain.model.catalog import ProductCatalog
from oms_client.domain.repository.product_repository import ProductRepository


class LoadCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> ProductCatalog:
        return ProductCatalog(self._product_repo.list_all())
