"""Unit tests for the StockMovement audit record."""

from datetime import datetime, timezone

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.stock_movement import StockMovement, StockMovementType


def _movement(**overrides) -> StockMovement:
    fields = dict(
        id="m1",
        product_id="p1",
        quantity=3,
        type=StockMovementType.OUT,
        reason="Sale #abcd1234",
        date=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return StockMovement(**fields)


class TestStockMovement:

    def test_valid_movement(self):
        m = _movement(user_id="u1", stock_after=7)
        assert m.quantity == 3
        assert m.type is StockMovementType.OUT
        assert m.user_id == "u1"
        assert m.stock_after == 7

    def test_optional_fields_default_to_none(self):
        m = _movement()
        assert m.user_id is None
        assert m.stock_after is None

    @pytest.mark.parametrize("qty", [0, -2])
    def test_quantity_must_be_positive(self, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            _movement(quantity=qty)

    def test_type_must_be_enum(self):
        with pytest.raises(ValidationError, match="Unknown movement type"):
            _movement(type="SIDEWAYS")

    def test_is_immutable(self):
        m = _movement()
        with pytest.raises(AttributeError):
            m.reason = "changed"  # type: ignore[misc]

    def test_enum_values(self):
        assert {t.value for t in StockMovementType} == {"IN", "OUT", "ADJUSTMENT"}
