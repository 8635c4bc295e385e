"""Composition root: binds the HTTP repositories and the session file.

The CLI builds one Container per invocation from ClientSettings; tests
hand the CLI a fake with the same factory methods instead.
"""

from __future__ import annotations

from oms_client.application.load_catalog import LoadCatalogHandler
from oms_client.application.order_list import OrderListView
from oms_client.application.session import Session
from oms_client.application.submission_controller import SubmissionController
from oms_client.infrastructure.config import ClientSettings
from oms_client.infrastructure.http.api_client import ApiClient
from oms_client.infrastructure.http.http_auth_repository import HttpAuthRepository
from oms_client.infrastructure.http.http_history_repository import HttpHistoryRepository
from oms_client.infrastructure.http.http_order_repository import HttpOrderRepository
from oms_client.infrastructure.http.http_product_repository import (
    HttpProductRepository,
)
from oms_client.infrastructure.persistence.json_session_store import JsonSessionStore


class Container:
    """Everything one CLI invocation needs, sharing a single Session."""

    def __init__(self, settings: ClientSettings) -> None:
        self.settings = settings
        self.session = Session(JsonSessionStore(settings.session_file))
        self.api = ApiClient(
            settings.api_base_url, self.session, timeout=settings.timeout_seconds
        )

    def auth_repository(self) -> HttpAuthRepository:
        return HttpAuthRepository(self.api)

    def product_repository(self) -> HttpProductRepository:
        return HttpProductRepository(self.api)

    def order_repository(self) -> HttpOrderRepository:
        return HttpOrderRepository(self.api)

    def history_repository(self) -> HttpHistoryRepository:
        return HttpHistoryRepository(self.api)

    def submission_controller(self) -> SubmissionController:
        order_repo = self.order_repository()
        return SubmissionController(
            catalog_loader=LoadCatalogHandler(self.product_repository()),
            order_repo=order_repo,
            order_list=OrderListView(order_repo),
        )
