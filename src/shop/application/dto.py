"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerOrderLine:
    """Output: one order in a customer's history (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CustomerOrdersDTO:
    """Output: a customer and the orders they placed, oldest first."""

    customer_name: str
    email: str
    orders: list[CustomerOrderLine]
