"""Product entity.

Products are identified by their name.  Once created they never change:
orders reference the product itself rather than a price snapshot, so a
product's price must stay fixed for the life of the process.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from shop.domain.exceptions import InvalidFormatError, OutOfRangeError
from shop.domain.model.value_objects import Money

NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` is one or more ASCII letters or digits
    - ``price`` is greater than zero
    - ``quantity`` is a non-negative integer (stock on hand at creation)
    """

    name: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not NAME_PATTERN.fullmatch(self.name):
            raise InvalidFormatError("Product name must be alphanumeric.")
        if self.price.amount <= Decimal("0"):
            raise OutOfRangeError("Product price must be greater than zero.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidFormatError(
                f"Product quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise OutOfRangeError("Product quantity must be non-negative.")
