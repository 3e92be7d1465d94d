"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import LOW_STOCK_THRESHOLD, Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, newest first."""

    @abstractmethod
    def list_by_category(self, category: str) -> list[Product]:
        """Return the products of a category, ordered by name."""

    @abstractmethod
    def list_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        """Return in-stock products below *threshold*, lowest stock first."""

    @abstractmethod
    def list_out_of_stock(self) -> list[Product]:
        """Return products with zero stock, ordered by name."""

    @abstractmethod
    def search(self, query: str) -> list[Product]:
        """Case-insensitive partial match on name, description or category."""

    @abstractmethod
    def search_by_name(self, name: str) -> list[Product]:
        """Case-insensitive partial match on name only."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Return False if it did not exist."""

    @abstractmethod
    def exists(self, product_id: str) -> bool:
        """Return True if a product with this ID is stored."""
