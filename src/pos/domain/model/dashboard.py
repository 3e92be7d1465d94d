"""Read model for the dashboard: consolidated inventory and sales metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.model.sale import Sale

RECENT_SALES_LIMIT = 5
TOP_SELLING_LIMIT = 5
LOW_STOCK_LIST_LIMIT = 10


@dataclass(frozen=True)
class TopSellingProduct:
    name: str
    total_sold: int


@dataclass(frozen=True)
class LowStockProduct:
    id: str
    name: str
    stock: int
    category: str | None = None


@dataclass(frozen=True)
class DashboardStats:
    total_inventory_value: Decimal
    total_products: int
    low_stock_count: int
    recent_sales: list[Sale] = field(default_factory=list)
    top_selling_products: list[TopSellingProduct] = field(default_factory=list)
    low_stock_products: list[LowStockProduct] = field(default_factory=list)
