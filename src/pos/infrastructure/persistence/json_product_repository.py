"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pos.domain.model.product import LOW_STOCK_THRESHOLD, Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, "products")

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> None:
        records = self._file.load()
        row = self._to_raw(product)
        for i, raw in enumerate(records):
            if raw.get("id") == product.id:
                records[i] = row
                break
        else:
            records.append(row)
        self._file.persist(records)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw.get("id") == product_id:
                return self._file.decode(raw, self._to_domain)
        return None

    def list_all(self) -> list[Product]:
        products = self._load_all()
        products.sort(key=lambda p: p.created_at, reverse=True)
        return products

    def list_by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        products = [
            p for p in self._load_all()
            if p.category is not None and p.category.lower() == wanted
        ]
        return _by_name(products)

    def list_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        products = [p for p in self._load_all() if 0 < p.stock < threshold]
        products.sort(key=lambda p: (p.stock, p.name.lower()))
        return products

    def list_out_of_stock(self) -> list[Product]:
        return _by_name([p for p in self._load_all() if p.stock == 0])

    def search(self, query: str) -> list[Product]:
        needle = query.lower()
        return _by_name([
            p for p in self._load_all()
            if any(
                needle in field.lower()
                for field in (p.name, p.description, p.category)
                if field
            )
        ])

    def search_by_name(self, name: str) -> list[Product]:
        needle = name.lower()
        return _by_name([p for p in self._load_all() if needle in p.name.lower()])

    def delete(self, product_id: str) -> bool:
        records = self._file.load()
        remaining = [raw for raw in records if raw.get("id") != product_id]
        if len(remaining) == len(records):
            return False
        self._file.persist(remaining)
        return True

    def exists(self, product_id: str) -> bool:
        return any(raw.get("id") == product_id for raw in self._file.load())

    # --- Serialization --------------------------------------------------------

    def _load_all(self) -> list[Product]:
        return [self._file.decode(raw, self._to_domain) for raw in self._file.load()]

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price_amount": str(product.price.amount),
            "price_currency": product.price.currency,
            "stock": product.stock,
            "description": product.description,
            "category": product.category,
            "image_url": product.image_url,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money.create(raw["price_amount"], raw["price_currency"]),
            stock=raw["stock"],
            description=raw.get("description"),
            category=raw.get("category"),
            image_url=raw.get("image_url"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )


def _by_name(products: list[Product]) -> list[Product]:
    return sorted(products, key=lambda p: p.name.lower())
