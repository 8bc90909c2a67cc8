"""Order entity: one customer buying one product.

Orders are appended to the order book and never modified or removed.
They hold references to the Customer and Product they were placed with;
both are immutable, so the total is always computed from the price the
product had when the order was placed.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import InvalidFormatError
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """A placed order.

    ``quantity`` must be an integer but is not bounded: it is not checked
    against (nor deducted from) the product's stock.
    """

    customer: Customer
    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidFormatError(
                f"Order quantity must be an integer, got {type(self.quantity).__name__}"
            )

    @property
    def total_price(self) -> Money:
        return self.product.price * self.quantity

    @property
    def customer_email(self) -> str:
        return self.customer.email

    @property
    def product_name(self) -> str:
        return self.product.name
