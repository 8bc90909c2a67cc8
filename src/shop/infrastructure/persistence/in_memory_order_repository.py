"""In-memory implementation of OrderRepository.

A plain list: orders are only ever appended, never replaced or removed.
"""

from __future__ import annotations

from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._orders: list[Order] = []

    # --- OrderRepository interface --------------------------------------------

    def append(self, order: Order) -> None:
        self._orders.append(order)

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def count(self) -> int:
        return len(self._orders)
