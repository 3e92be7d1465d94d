"""JSON-file-backed implementation of StockMovementRepository (append-only)."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pos.domain.model.stock_movement import StockMovement, StockMovementType
from pos.domain.repository.stock_movement_repository import StockMovementRepository
from pos.infrastructure.persistence.json_file import JsonFile


class JsonStockMovementRepository(StockMovementRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, "stock movements")

    def save(self, movement: StockMovement) -> None:
        records = self._file.load()
        records.append(self._to_raw(movement))
        self._file.persist(records)

    def list_by_product_id(self, product_id: str) -> list[StockMovement]:
        return [
            self._file.decode(raw, self._to_domain)
            for raw in self._file.load()
            if raw.get("product_id") == product_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(movement: StockMovement) -> dict:
        return {
            "id": movement.id,
            "product_id": movement.product_id,
            "quantity": movement.quantity,
            "type": movement.type.value,
            "reason": movement.reason,
            "created_at": movement.date.isoformat(),
            "user_id": movement.user_id,
            "stock_after": movement.stock_after,
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockMovement:
        return StockMovement(
            id=raw["id"],
            product_id=raw["product_id"],
            quantity=raw["quantity"],
            type=StockMovementType(raw["type"]),
            reason=raw["reason"],
            date=datetime.fromisoformat(raw["created_at"]),
            user_id=raw.get("user_id"),
            stock_after=raw.get("stock_after"),
        )
