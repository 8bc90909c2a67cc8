"""Abstract repository for the order book (an append-only log)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Append a placed order to the end of the log."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of orders in the log."""
