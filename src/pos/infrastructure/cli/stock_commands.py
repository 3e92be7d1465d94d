"""CLI commands for stock levels and the stock movement history."""

from __future__ import annotations

import click

from pos.application.dto import UpdateStockRequest
from pos.application.show_stock_movements import GetStockMovementsHandler
from pos.application.update_stock import UpdateStockHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.stock_movement import StockMovementType
from pos.infrastructure.bootstrap import product_repository, stock_movement_repository


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--type", "movement_type", required=True,
              type=click.Choice([t.value for t in StockMovementType], case_sensitive=False),
              help="IN, OUT or ADJUSTMENT.")
@click.option("--quantity", required=True, type=int,
              help="Units; for ADJUSTMENT a signed delta (e.g. -2).")
@click.option("--reason", required=True, help="Why the stock changed.")
@click.option("--user", "user_id", default=None, help="Who made the change.")
def stock_update(
    product_id: str,
    movement_type: str,
    quantity: int,
    reason: str,
    user_id: str | None,
) -> None:
    """Record a stock entry, exit or adjustment."""
    handler = UpdateStockHandler(
        product_repo=product_repository(),
        stock_movement_repo=stock_movement_repository(),
    )
    request = UpdateStockRequest(
        product_id=product_id,
        quantity=quantity,
        type=StockMovementType(movement_type.upper()),
        reason=reason,
        user_id=user_id,
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock of {dto.id} '{dto.name}' is now {dto.stock}")


@click.command("history")
@click.option("--id", "product_id", required=True, help="Product ID.")
def stock_history(product_id: str) -> None:
    """Show the stock movements of a product, newest first."""
    handler = GetStockMovementsHandler(stock_movement_repo=stock_movement_repository())

    try:
        movements = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not movements:
        click.echo("No stock movements recorded.")
        return

    click.echo(f"{'Date':<22} {'Type':<11} {'Qty':>6} {'After':>6}  Reason")
    click.echo("-" * 70)
    for m in movements:
        after = "" if m.stock_after is None else str(m.stock_after)
        click.echo(f"{m.date:<22} {m.type:<11} {m.quantity:>6} {after:>6}  {m.reason}")
