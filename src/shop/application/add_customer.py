"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from shop.domain.exceptions import DuplicateKeyError, InvalidFormatError
from shop.domain.model.customer import Customer
from shop.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, email: str) -> Customer:
        """Register a customer; the email is the customer's key."""
        try:
            customer = Customer(name=name, email=email)
        except InvalidFormatError as exc:
            logger.debug("Rejected customer %r: %s", email, exc)
            raise

        if self._customer_repo.get_by_email(email) is not None:
            logger.info("Rejected customer %r: email already registered", email)
            raise DuplicateKeyError("Customer with the same email already exists.")

        self._customer_repo.add(customer)
        logger.info("Added customer %s <%s>", customer.name, customer.email)
        return customer
