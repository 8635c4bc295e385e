"""Application service: Dashboard use case (query).

A summary over the current products and orders: counts, how many
products are running low, and the most recent orders.
"""

from __future__ import annotations

from oms_client.application.dto import DashboardDTO, OrderDTO
from oms_client.domain.repository.order_repository import OrderRepository
from oms_client.domain.repository.product_repository import ProductRepository

LOW_STOCK_THRESHOLD = 10
RECENT_ORDER_COUNT = 5
LOAD_ERROR = "Failed to load dashboard data. Please try again."


class DashboardHandler:

    def __init__(self, product_repo: ProductRepository, order_repo: OrderRepository) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self) -> DashboardDTO:
        products = self._product_repo.list_all()
        orders = self._order_repo.list_all()
        return DashboardDTO(
            total_products=len(products),
            total_orders=len(orders),
            low_stock_products=sum(
                1 for p in products if p.available_quantity < LOW_STOCK_THRESHOLD
            ),
            recent_orders=[OrderDTO.from_order(o) for o in orders[:RECENT_ORDER_COUNT]],
        )
