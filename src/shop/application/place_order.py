"""Application service: Place Order use case.

The only use case that writes to the order book.  It reads the customer
registry and the inventory, then appends; stock is neither checked nor
deducted.
"""

from __future__ import annotations

import logging

from shop.application.lookups import require_customer, require_product
from shop.domain.exceptions import InvalidFormatError
from shop.domain.model.order import Order
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_email: str, product_name: str, quantity: int) -> Order:
        """Place an order for *quantity* units of a product.

        Raises EntityNotFoundError for an unknown customer (checked first)
        or an unknown product, and InvalidFormatError for a non-integer
        quantity; nothing is appended in any of these cases.
        """
        customer = require_customer(self._customer_repo, customer_email)
        product = require_product(self._product_repo, product_name)

        try:
            order = Order(customer=customer, product=product, quantity=quantity)
        except InvalidFormatError as exc:
            logger.debug("Rejected order for %s: %s", customer.email, exc)
            raise

        total = order.total_price
        self._order_repo.append(order)
        logger.info(
            "Order placed: %s x%d for %s (total %s)",
            product.name, quantity, customer.email, total,
        )
        return order
