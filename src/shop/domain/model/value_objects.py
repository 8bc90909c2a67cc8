"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shop.domain.exceptions import ParseError, ValidationError

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  The amount is signed: an
    order total for a zero or negative quantity is still a Money.  Whether
    a price must be positive is decided by the Product, not here.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        if self.currency == DEFAULT_CURRENCY:
            return f"${self._display_amount()}"
        return f"{self._display_amount()} {self.currency}"

    def _display_amount(self) -> str:
        # Cents at least; finer amounts (e.g. 1.005) are shown as stored.
        if self.amount.as_tuple().exponent >= -2:
            return f"{self.amount:.2f}"
        return f"{self.amount:f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(
        amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY
    ) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ParseError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ParseError(f"Invalid money amount: {amount!r}")
        return Money(value, currency)

    @staticmethod
    def parse(raw: str, currency: str = DEFAULT_CURRENCY) -> Money:
        """Parse a price literal as typed by a user.

        An optional leading ``$`` is accepted (``"$5.50"`` and ``"5.50"``
        are the same price).  Anything else that is not a decimal number
        raises ParseError.
        """
        text = raw.strip()
        if text.startswith("$"):
            text = text[1:]
        if not text:
            raise ParseError(f"Invalid price: {raw!r}")
        try:
            return Money.of(text, currency)
        except ParseError as exc:
            raise ParseError(f"Invalid price: {raw!r}") from exc
