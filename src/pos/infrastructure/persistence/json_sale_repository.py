"""JSON-file-backed implementation of SaleRepository.

A sale is stored as one record holding the header (id, customer, total,
currency, date) and its items, so header and lines are written together.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pos.domain.model.sale import Sale, SaleItem
from pos.domain.model.value_objects import Money
from pos.domain.repository.sale_repository import SaleRepository
from pos.infrastructure.persistence.json_file import JsonFile


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, "sales")

    # --- SaleRepository interface ---------------------------------------------

    def save(self, sale: Sale) -> None:
        records = self._file.load()
        row = self._to_raw(sale)
        for i, raw in enumerate(records):
            if raw.get("id") == sale.id:
                records[i] = row
                break
        else:
            records.append(row)
        self._file.persist(records)

    def get_by_id(self, sale_id: str) -> Sale | None:
        for raw in self._file.load():
            if raw.get("id") == sale_id:
                return self._file.decode(raw, self._to_domain)
        return None

    def list_all(self) -> list[Sale]:
        sales = [self._file.decode(raw, self._to_domain) for raw in self._file.load()]
        sales.sort(key=lambda s: s.date, reverse=True)
        return sales

    def list_recent(self, limit: int) -> list[Sale]:
        return self.list_all()[:limit]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        total = sale.total_amount
        return {
            "id": sale.id,
            "customer_name": sale.customer_name,
            "total_amount": str(total.amount),
            "currency": total.currency,
            "created_at": sale.date.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "subtotal": str(item.subtotal.amount),
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        items = [
            SaleItem(
                id=i["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=i["quantity"],
                unit_price=Money.create(i["unit_price"], i.get("currency", raw["currency"])),
            )
            for i in raw["items"]
        ]
        return Sale(
            id=raw["id"],
            date=datetime.fromisoformat(raw["created_at"]),
            items=items,
            customer_name=raw.get("customer_name"),
        )
