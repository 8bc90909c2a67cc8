"""Abstract repository for the customer registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by exact email, or None if not registered."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Store a new customer. Its email must not be registered yet."""
