"""Application service: Update Stock use case.

Applies one typed stock change to a product and appends the matching
record to the stock movement audit trail.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from pos.application.dto import ProductDTO, UpdateStockRequest
from pos.application.mappers import to_product_dto
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.stock_movement import StockMovement, StockMovementType
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.stock_movement_repository import StockMovementRepository

log = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        stock_movement_repo: StockMovementRepository,
    ) -> None:
        self._product_repo = product_repo
        self._stock_movement_repo = stock_movement_repo

    def handle(self, request: UpdateStockRequest) -> ProductDTO:
        """Apply a stock change and return the updated product.

        IN adds ``quantity`` units, OUT removes them, ADJUSTMENT applies
        ``quantity`` as a signed delta.  The movement always stores the
        magnitude of the change plus the resulting stock level.
        """
        product = self._product_repo.get_by_id(request.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Product with ID '{request.product_id}' not found"
            )

        self._apply(product, request)

        movement = StockMovement(
            id=str(uuid.uuid4()),
            product_id=product.id,
            quantity=abs(request.quantity),
            type=request.type,
            reason=request.reason.strip(),
            date=datetime.now(timezone.utc),
            user_id=request.user_id,
            stock_after=product.stock,
        )

        self._product_repo.save(product)
        self._stock_movement_repo.save(movement)

        log.info("Stock %s of %d for product %s (now %d)",
                 request.type.value, request.quantity, product.id, product.stock)
        return to_product_dto(product)

    @staticmethod
    def _apply(product: Product, request: UpdateStockRequest) -> None:
        if request.type == StockMovementType.IN:
            product.increase_stock(request.quantity)
        elif request.type == StockMovementType.OUT:
            product.decrease_stock(request.quantity)
        elif request.type == StockMovementType.ADJUSTMENT:
            if request.quantity == 0:
                raise ValidationError("Adjustment quantity cannot be zero")
            if request.quantity > 0:
                product.increase_stock(request.quantity)
            else:
                product.decrease_stock(-request.quantity)
        else:
            raise ValidationError(f"Unknown movement type: {request.type!r}")
