"""In-memory implementation of ProductRepository.

Products live in a dict keyed by name for the lifetime of the process.
Python dicts keep insertion order, so listing is deterministic.
"""

from __future__ import annotations

from shop.domain.exceptions import DuplicateKeyError
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            self.add(product)

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def add(self, product: Product) -> None:
        if product.name in self._store:
            raise DuplicateKeyError(f"Product '{product.name}' already exists")
        self._store[product.name] = product
