"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shop.application.shop import Shop
from shop.infrastructure.config import Settings
from shop.infrastructure.persistence.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from shop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from shop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def build_shop(settings: Settings | None = None) -> Shop:
    """Return a Shop with empty in-memory collections."""
    settings = settings or Settings()
    return Shop(
        product_repo=InMemoryProductRepository(),
        customer_repo=InMemoryCustomerRepository(),
        order_repo=InMemoryOrderRepository(),
        currency=settings.currency,
    )
