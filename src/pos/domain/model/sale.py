"""Sale aggregate: a completed point-of-sale transaction.

The Sale is an aggregate root that exclusively owns its line items.
Callers only ever receive copies of the item list.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class SaleItem:
    """Captures the name and price of a product at sale time.

    ``product_name`` and ``unit_price`` are snapshots; later catalog
    changes never alter a recorded sale.
    """

    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money  # locked at sale time

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Sold quantity must be positive")

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


class Sale:
    """Aggregate root for sales.

    The total is recomputed eagerly whenever the item list changes, so
    ``total_amount`` is always consistent with ``items``.
    """

    def __init__(
        self,
        id: str,
        date: datetime,
        items: list[SaleItem],
        customer_name: str | None = None,
    ) -> None:
        self.id = id
        self.date = date
        self.customer_name = customer_name
        self._items = list(items)
        self._total_amount = self._calculate_total()

    @property
    def items(self) -> list[SaleItem]:
        return list(self._items)

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    # --- Item management ------------------------------------------------------

    def add_item(self, new_item: SaleItem) -> None:
        """Add a line.  A product already on the sale gets its quantity summed."""
        for index, item in enumerate(self._items):
            if item.product_id == new_item.product_id:
                self._items[index] = SaleItem(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity + new_item.quantity,
                    unit_price=item.unit_price,
                )
                break
        else:
            self._items.append(new_item)
        self._total_amount = self._calculate_total()

    def remove_item(self, product_id: str) -> None:
        self._items = [item for item in self._items if item.product_id != product_id]
        self._total_amount = self._calculate_total()

    # --- Computed values ------------------------------------------------------

    def calculate_tax(self, rate: Decimal | float) -> Money:
        """Tax owed on the total at *rate* (e.g. ``Decimal("0.16")``)."""
        return self._total_amount.multiply(rate)

    def _calculate_total(self) -> Money:
        if not self._items:
            return Money.zero(DEFAULT_CURRENCY)
        result = Money.zero(self._items[0].unit_price.currency)
        for item in self._items:
            result = result + item.subtotal
        return result

    def __repr__(self) -> str:
        return (
            f"Sale(id={self.id!r}, date={self.date!r}, items={self._items!r}, "
            f"customer_name={self.customer_name!r})"
        )
