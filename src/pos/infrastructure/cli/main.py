import click

from pos.config.settings import get_settings
from pos.infrastructure.cli.dashboard_commands import dashboard
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_search,
    product_show,
    product_update,
)
from pos.infrastructure.cli.sale_commands import sale_create, sale_show
from pos.infrastructure.cli.stock_commands import stock_history, stock_update
from pos.shared.logging_conf import setup_logging


@click.group()
def cli() -> None:
    """POS: inventory and point of sale."""
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_console=settings.log_console,
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def sale() -> None:
    """Register and inspect sales."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_history)
stock.add_command(stock_update)
sale.add_command(sale_create)
sale.add_command(sale_show)
cli.add_command(dashboard)
