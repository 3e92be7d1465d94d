"""Application services: product catalog queries."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.application.mappers import to_product_dto
from pos.domain.repository.product_repository import ProductRepository

MIN_SEARCH_LENGTH = 2


class GetAllProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        if category:
            products = self._product_repo.list_by_category(category.strip())
        else:
            products = self._product_repo.list_all()
        return [to_product_dto(p) for p in products]


class GetProductByIdHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO | None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return None
        return to_product_dto(product)


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: str) -> list[ProductDTO]:
        """Free-text search; queries under two characters match nothing."""
        if not query or len(query.strip()) < MIN_SEARCH_LENGTH:
            return []
        return [to_product_dto(p) for p in self._product_repo.search(query.strip())]


class GetLowStockProductsHandler:
    """Products that need restocking: low stock first, then sold out."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, include_out_of_stock: bool = False) -> list[ProductDTO]:
        products = self._product_repo.list_low_stock()
        if include_out_of_stock:
            products = products + self._product_repo.list_out_of_stock()
        return [to_product_dto(p) for p in products]
