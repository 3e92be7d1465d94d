"""Integration tests for the CreateSale use case.

Uses in-memory fake repositories, no file I/O.
"""

import logging

import pytest

from pos.application.create_sale import CreateSaleHandler
from pos.application.dto import SaleItemSpec
from pos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pos.domain.model.product import Product
from pos.domain.model.stock_movement import StockMovementType
from pos.domain.model.value_objects import Money
from tests.fakes import (
    FakeProductRepository,
    FakeSaleRepository,
    FakeStockMovementRepository,
)


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateSaleHandler, FakeSaleRepository, FakeProductRepository,
           FakeStockMovementRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product.create(id="p1", name="Brake Pad", price=Money.create("100"), stock=10),
            Product.create(id="p2", name="Oil Filter", price=Money.create("50"), stock=5),
        ]
    sale_repo = FakeSaleRepository()
    product_repo = FakeProductRepository(products)
    movement_repo = FakeStockMovementRepository()
    handler = CreateSaleHandler(sale_repo, product_repo, movement_repo)
    return handler, sale_repo, product_repo, movement_repo


class TestCreateSaleHappyPath:

    def test_single_item_sale(self):
        handler, sale_repo, product_repo, movement_repo = _setup()

        sale_id = handler.handle([SaleItemSpec("p1", 3)])

        assert product_repo.get_by_id("p1").stock == 7
        assert len(movement_repo.movements) == 1
        movement = movement_repo.movements[0]
        assert movement.type is StockMovementType.OUT
        assert movement.quantity == 3
        assert movement.product_id == "p1"
        assert movement.stock_after == 7

        saved = sale_repo.get_by_id(sale_id)
        assert saved is not None
        assert saved.id == sale_id
        assert saved.total_amount == Money.create(300, "MXN")

    def test_multi_item_sale(self):
        handler, sale_repo, product_repo, movement_repo = _setup()

        sale_id = handler.handle([SaleItemSpec("p1", 2), SaleItemSpec("p2", 5)])

        sale = sale_repo.get_by_id(sale_id)
        assert sale.total_amount == Money.create(450)
        assert [i.product_id for i in sale.items] == ["p1", "p2"]
        assert product_repo.get_by_id("p2").stock == 0
        assert len(movement_repo.movements) == 2

    def test_movement_reason_references_sale(self):
        handler, _, _, movement_repo = _setup()
        sale_id = handler.handle([SaleItemSpec("p1", 1)])
        assert movement_repo.movements[0].reason == f"Sale #{sale_id[:8]}"

    def test_movement_and_sale_share_timestamp(self):
        handler, sale_repo, _, movement_repo = _setup()
        sale_id = handler.handle([SaleItemSpec("p1", 1)])
        assert movement_repo.movements[0].date == sale_repo.get_by_id(sale_id).date

    def test_customer_name_recorded(self):
        handler, sale_repo, _, _ = _setup()
        sale_id = handler.handle([SaleItemSpec("p1", 1)], customer_name="  Ana  ")
        assert sale_repo.get_by_id(sale_id).customer_name == "Ana"

    def test_blank_customer_stored_as_none(self):
        handler, sale_repo, _, _ = _setup()
        sale_id = handler.handle([SaleItemSpec("p1", 1)], customer_name="   ")
        assert sale_repo.get_by_id(sale_id).customer_name is None

    def test_distinct_ids(self):
        handler, _, _, _ = _setup()
        first = handler.handle([SaleItemSpec("p1", 1)])
        second = handler.handle([SaleItemSpec("p1", 1)])
        assert first != second


class TestCreateSalePriceLock:

    def test_price_snapshot_at_sale_time(self):
        handler, sale_repo, product_repo, _ = _setup()

        sale_id = handler.handle([SaleItemSpec("p1", 2)])

        product = product_repo.get_by_id("p1")
        product.update_price(Money.create("999"))
        product.update_name("Renamed Pad")
        product_repo.save(product)

        sale = sale_repo.get_by_id(sale_id)
        assert sale.items[0].unit_price == Money.create(100)
        assert sale.items[0].product_name == "Brake Pad"
        assert sale.total_amount == Money.create(200)


class TestCreateSaleFailures:

    def test_unknown_product_writes_nothing(self):
        handler, sale_repo, product_repo, movement_repo = _setup()

        with pytest.raises(EntityNotFoundError, match="'nope' not found"):
            handler.handle([SaleItemSpec("nope", 1)])

        assert sale_repo.list_all() == []
        assert movement_repo.movements == []
        assert product_repo.save_count == 0

    def test_insufficient_stock_mutates_nothing(self):
        handler, sale_repo, product_repo, movement_repo = _setup()

        with pytest.raises(InsufficientStockError) as exc_info:
            handler.handle([SaleItemSpec("p2", 10)])

        assert exc_info.value.available == 5
        assert exc_info.value.requested == 10
        assert "Oil Filter" in str(exc_info.value)
        assert product_repo.get_by_id("p2").stock == 5
        assert product_repo.save_count == 0
        assert movement_repo.movements == []
        assert sale_repo.list_all() == []

    def test_empty_sale_rejected_before_any_write(self):
        handler, sale_repo, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle([])
        assert sale_repo.list_all() == []
        assert product_repo.save_count == 0

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity_rejected(self, qty):
        handler, _, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle([SaleItemSpec("p1", qty)])
        assert product_repo.get_by_id("p1").stock == 10

    def test_failure_on_later_item_keeps_earlier_writes(self, caplog):
        handler, sale_repo, product_repo, movement_repo = _setup()

        with caplog.at_level(logging.WARNING, logger="pos.application.create_sale"):
            with pytest.raises(InsufficientStockError):
                handler.handle([SaleItemSpec("p1", 2), SaleItemSpec("p2", 99)])

        # No transaction: the first item was already committed
        assert product_repo.get_by_id("p1").stock == 8
        assert product_repo.get_by_id("p2").stock == 5
        assert len(movement_repo.movements) == 1
        assert sale_repo.list_all() == []
        assert "aborted at item 2 of 2" in caplog.text

    def test_mixed_currencies_rejected_before_any_write(self):
        handler, sale_repo, product_repo, movement_repo = _setup([
            Product.create(id="p1", name="Brake Pad", price=Money.create("100", "MXN"), stock=10),
            Product.create(id="p2", name="Import Pad", price=Money.create("5", "USD"), stock=10),
        ])

        with pytest.raises(ValidationError, match=r"cannot mix currencies \(MXN, USD\)"):
            handler.handle([SaleItemSpec("p1", 2), SaleItemSpec("p2", 3)])

        assert product_repo.get_by_id("p1").stock == 10
        assert product_repo.get_by_id("p2").stock == 10
        assert product_repo.save_count == 0
        assert movement_repo.movements == []
        assert sale_repo.list_all() == []

    def test_unknown_product_on_later_line_writes_nothing(self):
        handler, sale_repo, product_repo, movement_repo = _setup()

        with pytest.raises(EntityNotFoundError):
            handler.handle([SaleItemSpec("p1", 2), SaleItemSpec("ghost", 1)])

        assert product_repo.get_by_id("p1").stock == 10
        assert product_repo.save_count == 0
        assert movement_repo.movements == []
        assert sale_repo.list_all() == []

    def test_repeated_product_checks_remaining_stock(self):
        handler, _, product_repo, movement_repo = _setup()

        with pytest.raises(InsufficientStockError) as exc_info:
            handler.handle([SaleItemSpec("p2", 3), SaleItemSpec("p2", 3)])

        assert exc_info.value.available == 2
        assert product_repo.get_by_id("p2").stock == 2
        assert len(movement_repo.movements) == 1
