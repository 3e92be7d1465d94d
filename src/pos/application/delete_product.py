"""Application service: Delete Product use case.

Deletion is a catalog operation only; recorded sales and stock movements
keep their product ID and name snapshot.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.product_repository import ProductRepository

log = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        log.info("Product %s deleted", product_id)
