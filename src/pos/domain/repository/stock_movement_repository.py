"""Abstract repository for the stock movement audit trail (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.stock_movement import StockMovement


class StockMovementRepository(ABC):

    @abstractmethod
    def save(self, movement: StockMovement) -> None:
        """Append a movement record."""

    @abstractmethod
    def list_by_product_id(self, product_id: str) -> list[StockMovement]:
        """Return the movements of a product, in no particular order."""
