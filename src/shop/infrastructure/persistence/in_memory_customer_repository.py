"""In-memory implementation of CustomerRepository."""

from __future__ import annotations

from shop.domain.exceptions import DuplicateKeyError
from shop.domain.model.customer import Customer
from shop.domain.repository.customer_repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for customer in customers or []:
            self.add(customer)

    # --- CustomerRepository interface -----------------------------------------

    def get_by_email(self, email: str) -> Customer | None:
        return self._store.get(email)

    def add(self, customer: Customer) -> None:
        if customer.email in self._store:
            raise DuplicateKeyError(f"Customer '{customer.email}' already exists")
        self._store[customer.email] = customer
