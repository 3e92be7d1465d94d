"""CLI command for the dashboard metrics."""

from __future__ import annotations

import click

from pos.application.show_dashboard import GetInventoryStatsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import dashboard_repository


@click.command("dashboard")
def dashboard() -> None:
    """Show inventory and sales metrics."""
    handler = GetInventoryStatsHandler(dashboard_repo=dashboard_repository())
    try:
        stats = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Products:         {stats.total_products}")
    click.echo(f"Low stock:        {stats.low_stock_count}")
    click.echo(f"Inventory value:  {stats.total_inventory_value:.2f}")

    click.echo()
    click.echo("Recent sales:")
    if not stats.recent_sales:
        click.echo("  (none)")
    for s in stats.recent_sales:
        click.echo(
            f"  {s.date:%Y-%m-%d %H:%M}  {s.id[:8]}  {s.customer_name or '-':<20} {str(s.total_amount):>14}"
        )

    click.echo()
    click.echo("Top sellers:")
    if not stats.top_selling_products:
        click.echo("  (none)")
    for t in stats.top_selling_products:
        click.echo(f"  {t.name:<24} {t.total_sold:>6}")

    click.echo()
    click.echo("Needs restocking:")
    if not stats.low_stock_products:
        click.echo("  (none)")
    for p in stats.low_stock_products:
        click.echo(f"  {p.id:<10} {p.name:<24} {p.stock:>6}")
