"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "MXN"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  The currency code is always
    stored trimmed and upper-cased.
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
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Money currency is required")
        object.__setattr__(self, "currency", self.currency.strip().upper())

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """Validating factory that coerces the amount to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"), currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def multiply(self, factor: int | float | Decimal) -> Money:
        value = _to_decimal(factor, "multiplication factor")
        if value < Decimal("0"):
            raise ValidationError("Multiplication factor cannot be negative")
        return Money(self.amount * value, self.currency)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    # --- Comparison -----------------------------------------------------------

    def equals(self, other: Money) -> bool:
        """Exact comparison of amount and currency."""
        return self.amount == other.amount and self.currency == other.currency

    def is_greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __lt__(self, other: Money) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict:
        return {"amount": str(self.amount), "currency": self.currency}

    @staticmethod
    def from_dict(data: dict) -> Money:
        return Money.create(data["amount"], data["currency"])

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )


def _to_decimal(value: str | float | int | Decimal, label: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    return result
