"""Application service: Create Sale use case.

The only multi-aggregate write in the system.  For every requested item
it looks up the Product, checks and decrements its stock, records an OUT
stock movement and snapshots the sale line; finally it stores the Sale.

Every product is resolved before the first write, so an unknown product
or a mix of currencies rejects the sale with nothing changed.  Stock
writes are NOT atomic though: products and movements are saved item by
item, so a stock failure on item N leaves items 1..N-1 already
decremented and recorded.
The storage layer offers no transaction to wrap this sequence in, and no
compensating action is attempted here.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from pos.application.dto import SaleItemSpec
from pos.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale, SaleItem
from pos.domain.model.stock_movement import StockMovement, StockMovementType
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository
from pos.domain.repository.stock_movement_repository import StockMovementRepository

log = logging.getLogger(__name__)


class CreateSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        product_repo: ProductRepository,
        stock_movement_repo: StockMovementRepository,
    ) -> None:
        self._sale_repo = sale_repo
        self._product_repo = product_repo
        self._stock_movement_repo = stock_movement_repo

    def handle(
        self,
        item_specs: list[SaleItemSpec],
        customer_name: str | None = None,
    ) -> str:
        """Register a sale and return its ID.

        First every product is loaded (fail if not found) and the sale is
        checked to use a single currency.  Then, per item:
        1. Validate the quantity.
        2. Check stock (fail with available vs requested).
        3. Decrement stock and record an OUT movement.
        4. Snapshot name and price into a SaleItem.
        5. Persist product and movement.
        Then build and persist the Sale.
        """
        if not item_specs:
            raise ValidationError("Sale must contain at least one item")

        sale_id = str(uuid.uuid4())
        sale_date = datetime.now(timezone.utc)
        products = self._load_products(item_specs)
        sale_items: list[SaleItem] = []

        for index, spec in enumerate(item_specs):
            try:
                sale_items.append(self._process_item(
                    products[spec.product_id], spec, sale_id, sale_date
                ))
            except DomainException:
                if index > 0:
                    log.warning(
                        "Sale %s aborted at item %d of %d; stock already "
                        "decremented for the previous items",
                        sale_id, index + 1, len(item_specs),
                    )
                raise

        name = customer_name.strip() if customer_name else None
        sale = Sale(id=sale_id, date=sale_date, items=sale_items, customer_name=name or None)
        self._sale_repo.save(sale)

        log.info("Sale %s registered: %d item(s), total %s",
                 sale.id, len(sale_items), sale.total_amount)
        return sale.id

    def _load_products(self, item_specs: list[SaleItemSpec]) -> dict[str, Product]:
        products: dict[str, Product] = {}
        for spec in item_specs:
            if spec.product_id in products:
                continue
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{spec.product_id}' not found")
            products[spec.product_id] = product

        currencies = sorted({p.price.currency for p in products.values()})
        if len(currencies) > 1:
            raise ValidationError(
                f"A sale cannot mix currencies ({', '.join(currencies)})"
            )
        return products

    def _process_item(
        self,
        product: Product,
        spec: SaleItemSpec,
        sale_id: str,
        sale_date: datetime,
    ) -> SaleItem:
        if spec.quantity <= 0:
            raise ValidationError("Sold quantity must be positive")

        if not product.has_enough_stock(spec.quantity):
            raise InsufficientStockError(
                product_name=product.name,
                available=product.stock,
                requested=spec.quantity,
            )

        product.decrease_stock(spec.quantity)

        movement = StockMovement(
            id=str(uuid.uuid4()),
            product_id=product.id,
            quantity=spec.quantity,
            type=StockMovementType.OUT,
            reason=f"Sale #{sale_id[:8]}",
            date=sale_date,
            stock_after=product.stock,
        )

        item = SaleItem(
            id=str(uuid.uuid4()),
            product_id=product.id,
            product_name=product.name,
            quantity=spec.quantity,
            unit_price=product.price,  # <-- price snapshot
        )

        self._product_repo.save(product)
        self._stock_movement_repo.save(movement)
        return item
