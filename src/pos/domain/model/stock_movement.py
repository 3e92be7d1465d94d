"""StockMovement: an append-only audit record of one stock change."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pos.domain.exceptions import ValidationError


class StockMovementType(Enum):
    IN = "IN"  # purchase or customer return
    OUT = "OUT"  # sale or shrinkage
    ADJUSTMENT = "ADJUSTMENT"  # manual correction after a physical count


@dataclass(frozen=True)
class StockMovement:
    """One stock change, recorded as a magnitude plus a type.

    ``quantity`` is always positive.  ``stock_after`` holds the product's
    stock level once the movement was applied, which keeps ADJUSTMENT
    records auditable in both directions.
    """

    id: str
    product_id: str
    quantity: int
    type: StockMovementType
    reason: str
    date: datetime
    user_id: str | None = None
    stock_after: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Movement quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Movement quantity must be positive")
        if not isinstance(self.type, StockMovementType):
            raise ValidationError(f"Unknown movement type: {self.type!r}")
