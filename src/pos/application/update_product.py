"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pos.application.dto import ProductDTO, UpdateProductRequest
from pos.application.mappers import to_product_dto
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

log = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: UpdateProductRequest) -> ProductDTO:
        """Update catalog fields of a product.

        Price changes do NOT affect existing sales; they captured a
        price snapshot at sale time.  Stock is changed only through
        the Update Stock use case so every change is audited.
        """
        product = self._product_repo.get_by_id(request.id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{request.id}' not found")

        if request.name is not None:
            product.update_name(request.name)
        if request.price is not None:
            currency = request.currency or product.price.currency
            product.update_price(Money.create(request.price, currency))
        if request.description is not None:
            product.update_description(request.description)
        if request.category is not None:
            product.update_category(request.category)

        self._product_repo.save(product)
        log.info("Product %s updated", product.id)
        return to_product_dto(product)
