"""Application service: Customer Orders use case (query)."""

from __future__ import annotations

from shop.application.dto import CustomerOrderLine, CustomerOrdersDTO
from shop.application.lookups import require_customer
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.order_repository import OrderRepository


class CustomerOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo

    def handle(self, customer_email: str) -> CustomerOrdersDTO:
        customer = require_customer(self._customer_repo, customer_email)
        return CustomerOrdersDTO(
            customer_name=customer.name,
            email=customer.email,
            orders=[
                CustomerOrderLine(product_name=order.product_name, quantity=order.quantity)
                for order in self._order_repo.list_all()
                if order.customer_email == customer_email
            ],
        )
