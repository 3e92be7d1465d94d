"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.stock_movement import StockMovementType


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: what the cashier rang up (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class UpdateStockRequest:
    """Input: a stock change.

    For IN and OUT, ``quantity`` is a positive magnitude.  For ADJUSTMENT
    it is a signed delta: positive adds units, negative removes them.
    """

    product_id: str
    quantity: int
    type: StockMovementType
    reason: str
    user_id: str | None = None


@dataclass(frozen=True)
class CreateProductRequest:
    id: str
    name: str
    price: str
    stock: int
    currency: str = "MXN"
    description: str | None = None
    category: str | None = None
    image_path: str | None = None  # uploaded before the product is created


@dataclass(frozen=True)
class UpdateProductRequest:
    """Input: a partial product update. ``None`` means "leave unchanged"."""

    id: str
    name: str | None = None
    price: str | None = None
    currency: str | None = None
    description: str | None = None
    category: str | None = None


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "MXN 100.00"
    price_amount: str
    currency: str
    stock: int
    description: str | None
    category: str | None
    image_url: str | None
    is_out_of_stock: bool
    has_low_stock: bool
    inventory_value: str
    created_at: str  # ISO 8601
    updated_at: str


@dataclass(frozen=True)
class StockMovementDTO:
    id: str
    product_id: str
    quantity: int
    type: str
    reason: str
    date: str
    user_id: str | None
    stock_after: int | None


@dataclass(frozen=True)
class ReceiptLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a sale as printed on a receipt.

    ``tax`` is the configured rate applied to ``total``.
    """

    sale_id: str
    date: str
    customer_name: str | None
    items: list[ReceiptLineDTO]
    total: str
    tax: str
    currency: str
