"""Application service: Order Total use case (query)."""

from __future__ import annotations

from shop.application.lookups import require_customer, require_product
from shop.domain.model.value_objects import Money
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository


class OrderTotalHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_email: str, product_name: str) -> Money:
        """Sum the totals of every order by this customer for this product.

        Both entities must exist even though only their keys are needed
        for the match.  Returns zero when no order matches.
        """
        require_customer(self._customer_repo, customer_email)
        product = require_product(self._product_repo, product_name)

        total = Money.zero(product.price.currency)
        for order in self._order_repo.list_all():
            if (
                order.customer_email == customer_email
                and order.product_name == product_name
            ):
                total = total + order.total_price
        return total
