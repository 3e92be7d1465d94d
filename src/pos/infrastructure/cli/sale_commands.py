"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import click

from pos.application.create_sale import CreateSaleHandler
from pos.application.dto import ReceiptDTO, SaleItemSpec
from pos.application.show_sale import ShowSaleHandler
from pos.config.settings import get_settings
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    product_repository,
    sale_repository,
    stock_movement_repository,
)


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse 'P001:3,P002:1' into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(SaleItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_receipt(dto: ReceiptDTO) -> None:
    click.echo(f"Sale {dto.sale_id}")
    click.echo(f"Date:     {dto.date}")
    if dto.customer_name:
        click.echo(f"Customer: {dto.customer_name}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>14} {item.subtotal:>14}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Total':<30} {dto.total:>29}")
    click.echo(f"  {'Tax':<30} {dto.tax:>29}")


def _show_handler() -> ShowSaleHandler:
    return ShowSaleHandler(
        sale_repo=sale_repository(),
        tax_rate=get_settings().tax_rate,
    )


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--customer", default=None, help="Customer name.")
def sale_create(items: str, customer: str | None) -> None:
    """Register a sale (decrements stock)."""
    specs = _parse_items(items)

    handler = CreateSaleHandler(
        sale_repo=sale_repository(),
        product_repo=product_repository(),
        stock_movement_repo=stock_movement_repository(),
    )

    try:
        sale_id = handler.handle(specs, customer_name=customer)
        receipt = _show_handler().handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(receipt)


@click.command("show")
@click.option("--id", "sale_id", required=True, help="Sale ID.")
def sale_show(sale_id: str) -> None:
    """Print the receipt of a sale."""
    try:
        receipt = _show_handler().handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(receipt)
