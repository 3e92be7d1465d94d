"""Abstract repository for Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def save(self, sale: Sale) -> None:
        """Persist a sale together with its items."""

    @abstractmethod
    def get_by_id(self, sale_id: str) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, newest first."""

    @abstractmethod
    def list_recent(self, limit: int) -> list[Sale]:
        """Return the *limit* newest sales."""
