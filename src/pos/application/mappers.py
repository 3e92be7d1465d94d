"""Mapping from domain objects to output DTOs."""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import (
    ProductDTO,
    ReceiptDTO,
    ReceiptLineDTO,
    StockMovementDTO,
)
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale
from pos.domain.model.stock_movement import StockMovement

DATE_DISPLAY_FORMAT = "%Y-%m-%d %H:%M UTC"


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        price_amount=str(product.price.amount),
        currency=product.price.currency,
        stock=product.stock,
        description=product.description,
        category=product.category,
        image_url=product.image_url,
        is_out_of_stock=product.is_out_of_stock,
        has_low_stock=product.has_low_stock,
        inventory_value=str(product.calculate_inventory_value()),
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )


def to_stock_movement_dto(movement: StockMovement) -> StockMovementDTO:
    return StockMovementDTO(
        id=movement.id,
        product_id=movement.product_id,
        quantity=movement.quantity,
        type=movement.type.value,
        reason=movement.reason,
        date=movement.date.strftime(DATE_DISPLAY_FORMAT),
        user_id=movement.user_id,
        stock_after=movement.stock_after,
    )


def to_receipt_dto(sale: Sale, tax_rate: Decimal) -> ReceiptDTO:
    total = sale.total_amount
    return ReceiptDTO(
        sale_id=sale.id,
        date=sale.date.strftime(DATE_DISPLAY_FORMAT),
        customer_name=sale.customer_name,
        items=[
            ReceiptLineDTO(
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in sale.items
        ],
        total=str(total),
        tax=str(sale.calculate_tax(tax_rate)),
        currency=total.currency,
    )
