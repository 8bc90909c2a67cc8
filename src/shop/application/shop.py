"""The Shop service: one object that owns the inventory, the customer
registry and the order book.

Every operation runs under a single re-entrant lock so that placing an
order (read inventory, read customers, append to the order book) is one
atomic step for any other caller sharing the same Shop.
"""

from __future__ import annotations

import threading
from decimal import Decimal

from shop.application.add_customer import AddCustomerHandler
from shop.application.add_product import AddProductHandler
from shop.application.customer_orders import CustomerOrdersHandler
from shop.application.dto import CustomerOrdersDTO
from shop.application.order_total import OrderTotalHandler
from shop.application.place_order import PlaceOrderHandler
from shop.domain.model.customer import Customer
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository


class Shop:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._lock = threading.RLock()

        self._add_product = AddProductHandler(product_repo, currency=currency)
        self._add_customer = AddCustomerHandler(customer_repo)
        self._place_order = PlaceOrderHandler(order_repo, product_repo, customer_repo)
        self._order_total = OrderTotalHandler(order_repo, product_repo, customer_repo)
        self._customer_orders = CustomerOrdersHandler(order_repo, customer_repo)

    # --- Inventory ------------------------------------------------------------

    def add_product(
        self,
        name: str,
        price: Money | str | float | int | Decimal,
        quantity: int,
    ) -> Product:
        with self._lock:
            return self._add_product.handle(name, price, quantity)

    def list_products(self) -> list[Product]:
        with self._lock:
            return self._product_repo.list_all()

    def lookup_product(self, name: str) -> Product | None:
        with self._lock:
            return self._product_repo.get_by_name(name)

    # --- Customer registry ----------------------------------------------------

    def add_customer(self, name: str, email: str) -> Customer:
        with self._lock:
            return self._add_customer.handle(name, email)

    def lookup_customer(self, email: str) -> Customer | None:
        with self._lock:
            return self._customer_repo.get_by_email(email)

    # --- Order book -----------------------------------------------------------

    def place_order(self, customer_email: str, product_name: str, quantity: int) -> Order:
        with self._lock:
            return self._place_order.handle(customer_email, product_name, quantity)

    def total_for_customer_and_product(self, customer_email: str, product_name: str) -> Money:
        with self._lock:
            return self._order_total.handle(customer_email, product_name)

    def orders_for_customer(self, customer_email: str) -> CustomerOrdersDTO:
        with self._lock:
            return self._customer_orders.handle(customer_email)

    def order_count(self) -> int:
        with self._lock:
            return self._order_repo.count()
