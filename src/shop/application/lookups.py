"""Lookups shared by the order use cases.

Placing an order and querying totals both insist that the customer and
the product exist, customer first.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository


def require_customer(customer_repo: CustomerRepository, email: str) -> Customer:
    customer = customer_repo.get_by_email(email)
    if customer is None:
        raise EntityNotFoundError(
            "Customer", email, "Customer with the provided email does not exist."
        )
    return customer


def require_product(product_repo: ProductRepository, name: str) -> Product:
    product = product_repo.get_by_name(name)
    if product is None:
        raise EntityNotFoundError(
            "Product", name, "Product with the provided name does not exist."
        )
    return product
