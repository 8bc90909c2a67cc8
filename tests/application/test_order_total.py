"""Integration tests for the OrderTotal query."""

import pytest

from shop.application.order_total import OrderTotalHandler
from shop.application.place_order import PlaceOrderHandler
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.infrastructure.persistence.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from shop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from shop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[PlaceOrderHandler, OrderTotalHandler]:
    order_repo = InMemoryOrderRepository()
    product_repo = InMemoryProductRepository([
        Product(name="Widget", price=Money.of("10.00"), quantity=100),
        Product(name="Gadget", price=Money.of("25.00"), quantity=5),
    ])
    customer_repo = InMemoryCustomerRepository([
        Customer(name="Alice", email="alice@example.com"),
        Customer(name="Bob", email="bob@example.com"),
    ])
    return (
        PlaceOrderHandler(order_repo, product_repo, customer_repo),
        OrderTotalHandler(order_repo, product_repo, customer_repo),
    )


class TestOrderTotal:

    def test_sums_across_orders(self):
        place, total = _setup()
        place.handle("alice@example.com", "Widget", 2)
        place.handle("alice@example.com", "Widget", 3)
        assert total.handle("alice@example.com", "Widget") == Money.of("50.00")

    def test_ignores_other_customers_and_products(self):
        place, total = _setup()
        place.handle("alice@example.com", "Widget", 1)
        place.handle("bob@example.com", "Widget", 7)
        place.handle("alice@example.com", "Gadget", 2)
        assert total.handle("alice@example.com", "Widget") == Money.of("10.00")
        assert total.handle("alice@example.com", "Gadget") == Money.of("50.00")

    def test_zero_when_no_orders_match(self):
        _, total = _setup()
        assert total.handle("bob@example.com", "Gadget") == Money.zero()

    def test_unknown_customer_rejected(self):
        _, total = _setup()
        with pytest.raises(EntityNotFoundError) as info:
            total.handle("carol@example.com", "Widget")
        assert info.value.entity == "Customer"

    def test_unknown_product_rejected(self):
        _, total = _setup()
        with pytest.raises(EntityNotFoundError) as info:
            total.handle("alice@example.com", "Gizmo")
        assert info.value.entity == "Product"
