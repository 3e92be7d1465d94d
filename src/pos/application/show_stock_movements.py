"""Application service: stock history query.

The movement log is an append-only audit trail, so history stays
readable after the product itself has been deleted from the catalog.
"""

from __future__ import annotations

from pos.application.dto import StockMovementDTO
from pos.application.mappers import to_stock_movement_dto
from pos.domain.repository.stock_movement_repository import StockMovementRepository


class GetStockMovementsHandler:

    def __init__(self, stock_movement_repo: StockMovementRepository) -> None:
        self._stock_movement_repo = stock_movement_repo

    def handle(self, product_id: str) -> list[StockMovementDTO]:
        """Return a product's movements, newest first."""
        movements = self._stock_movement_repo.list_by_product_id(product_id)
        movements.sort(key=lambda m: m.date, reverse=True)
        return [to_stock_movement_dto(m) for m in movements]
