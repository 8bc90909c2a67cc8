"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.domain.exceptions import DuplicateKeyError, ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        price: Money | str | float | int | Decimal,
        quantity: int,
    ) -> Product:
        """Add a new product to the inventory.

        ``price`` may already be a Money or a raw literal such as ``"$9.99"``.
        A name that is already registered is rejected before the product
        itself is validated, so re-adding a name always reports a duplicate.
        """
        if not isinstance(price, Money):
            try:
                price = Money.parse(str(price), self._currency)
            except ValidationError as exc:
                logger.debug("Rejected product %r: %s", name, exc)
                raise

        if self._product_repo.get_by_name(name) is not None:
            logger.info("Rejected product %r: name already registered", name)
            raise DuplicateKeyError("Product with the same name already exists.")

        try:
            product = Product(name=name, price=price, quantity=quantity)
        except ValidationError as exc:
            logger.debug("Rejected product %r: %s", name, exc)
            raise

        self._product_repo.add(product)
        logger.info("Added product %s at %s (qty %d)", product.name, product.price, product.quantity)
        return product
