"""DashboardRepository computed from the product and sale stores."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal

from pos.domain.model.dashboard import (
    LOW_STOCK_LIST_LIMIT,
    RECENT_SALES_LIMIT,
    TOP_SELLING_LIMIT,
    DashboardStats,
    LowStockProduct,
    TopSellingProduct,
)
from pos.domain.model.product import LOW_STOCK_THRESHOLD
from pos.domain.repository.dashboard_repository import DashboardRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository


class JsonDashboardRepository(DashboardRepository):

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo

    def get_stats(self) -> DashboardStats:
        products = self._product_repo.list_all()
        sales = self._sale_repo.list_all()

        # Amounts are summed as plain numbers; a mixed-currency catalog is
        # not converted.
        total_value = sum(
            (p.calculate_inventory_value().amount for p in products), Decimal("0")
        )

        sold: Counter[str] = Counter()
        for sale in sales:
            for item in sale.items:
                sold[item.product_name] += item.quantity

        restock = sorted(
            (p for p in products if p.stock < LOW_STOCK_THRESHOLD),
            key=lambda p: (p.stock, p.name.lower()),
        )

        return DashboardStats(
            total_inventory_value=total_value,
            total_products=len(products),
            low_stock_count=sum(1 for p in products if p.has_low_stock),
            recent_sales=sales[:RECENT_SALES_LIMIT],
            top_selling_products=[
                TopSellingProduct(name=name, total_sold=qty)
                for name, qty in sold.most_common(TOP_SELLING_LIMIT)
            ],
            low_stock_products=[
                LowStockProduct(id=p.id, name=p.name, stock=p.stock, category=p.category)
                for p in restock[:LOW_STOCK_LIST_LIMIT]
            ],
        )
