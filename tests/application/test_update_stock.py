"""Integration tests for the UpdateStock use case."""

import pytest

from pos.application.dto import UpdateStockRequest
from pos.application.update_stock import UpdateStockHandler
from pos.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from pos.domain.model.product import Product
from pos.domain.model.stock_movement import StockMovementType
from pos.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, FakeStockMovementRepository


def _setup(stock: int = 10):
    product = Product.create(id="p1", name="Brake Pad", price=Money.create("100"), stock=stock)
    product_repo = FakeProductRepository([product])
    movement_repo = FakeStockMovementRepository()
    return UpdateStockHandler(product_repo, movement_repo), product_repo, movement_repo


def _request(quantity: int, type: StockMovementType, reason: str = "Count") -> UpdateStockRequest:
    return UpdateStockRequest(product_id="p1", quantity=quantity, type=type, reason=reason)


class TestUpdateStockIn:

    def test_in_adds_units(self):
        handler, product_repo, movement_repo = _setup()
        dto = handler.handle(_request(5, StockMovementType.IN, "Supplier delivery"))

        assert dto.stock == 15
        assert product_repo.get_by_id("p1").stock == 15
        movement = movement_repo.movements[0]
        assert movement.type is StockMovementType.IN
        assert movement.quantity == 5
        assert movement.reason == "Supplier delivery"
        assert movement.stock_after == 15

    def test_user_id_recorded(self):
        handler, _, movement_repo = _setup()
        handler.handle(UpdateStockRequest("p1", 1, StockMovementType.IN, "Return", user_id="u7"))
        assert movement_repo.movements[0].user_id == "u7"

    @pytest.mark.parametrize("qty", [0, -4])
    def test_in_requires_positive(self, qty):
        handler, product_repo, movement_repo = _setup()
        with pytest.raises(ValidationError):
            handler.handle(_request(qty, StockMovementType.IN))
        assert product_repo.get_by_id("p1").stock == 10
        assert movement_repo.movements == []


class TestUpdateStockOut:

    def test_out_removes_units(self):
        handler, _, movement_repo = _setup()
        dto = handler.handle(_request(4, StockMovementType.OUT, "Damaged"))
        assert dto.stock == 6
        assert movement_repo.movements[0].type is StockMovementType.OUT

    def test_out_beyond_stock_rejected(self):
        handler, product_repo, movement_repo = _setup(stock=3)
        with pytest.raises(InsufficientStockError):
            handler.handle(_request(4, StockMovementType.OUT))
        assert product_repo.get_by_id("p1").stock == 3
        assert product_repo.save_count == 0
        assert movement_repo.movements == []


class TestUpdateStockAdjustment:

    def test_positive_adjustment(self):
        handler, _, movement_repo = _setup()
        dto = handler.handle(_request(3, StockMovementType.ADJUSTMENT))
        assert dto.stock == 13
        assert movement_repo.movements[0].quantity == 3
        assert movement_repo.movements[0].stock_after == 13

    def test_negative_adjustment_records_magnitude(self):
        handler, _, movement_repo = _setup()
        dto = handler.handle(_request(-4, StockMovementType.ADJUSTMENT, "Physical count"))
        assert dto.stock == 6
        movement = movement_repo.movements[0]
        assert movement.type is StockMovementType.ADJUSTMENT
        assert movement.quantity == 4
        assert movement.stock_after == 6

    def test_zero_adjustment_rejected(self):
        handler, _, movement_repo = _setup()
        with pytest.raises(ValidationError, match="cannot be zero"):
            handler.handle(_request(0, StockMovementType.ADJUSTMENT))
        assert movement_repo.movements == []

    def test_negative_adjustment_cannot_go_below_zero(self):
        handler, product_repo, _ = _setup(stock=2)
        with pytest.raises(InsufficientStockError):
            handler.handle(_request(-3, StockMovementType.ADJUSTMENT))
        assert product_repo.get_by_id("p1").stock == 2


class TestUpdateStockErrors:

    def test_unknown_product(self):
        handler, _, movement_repo = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(UpdateStockRequest("ghost", 1, StockMovementType.IN, "x"))
        assert movement_repo.movements == []
