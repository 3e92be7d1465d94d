"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.create_product import CreateProductHandler
from pos.application.delete_product import DeleteProductHandler
from pos.application.dto import CreateProductRequest, ProductDTO, UpdateProductRequest
from pos.application.show_products import (
    GetAllProductsHandler,
    GetLowStockProductsHandler,
    GetProductByIdHandler,
    SearchProductsHandler,
)
from pos.application.update_product import UpdateProductHandler
from pos.config.settings import get_settings
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import image_service, product_repository


def _display_table(products: list[ProductDTO]) -> None:
    """Shared formatting for product listings."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<24} {'Price':>14} {'Stock':>6}  Status")
    click.echo("-" * 66)
    for p in products:
        status = "OUT" if p.is_out_of_stock else ("LOW" if p.has_low_stock else "")
        click.echo(f"{p.id:<10} {p.name:<24} {p.price:>14} {p.stock:>6}  {status}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (e.g. SKU).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 150.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--currency", default=None, help="Currency code (defaults to POS_DEFAULT_CURRENCY).")
@click.option("--description", default=None, help="Description.")
@click.option("--category", default=None, help="Category.")
@click.option("--image", "image_path", default=None,
              type=click.Path(exists=True, dir_okay=False), help="Product picture to upload.")
def product_add(
    product_id: str,
    name: str,
    price: str,
    stock: int,
    currency: str | None,
    description: str | None,
    category: str | None,
    image_path: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(),
        image_service=image_service(),
    )
    request = CreateProductRequest(
        id=product_id,
        name=name,
        price=price,
        stock=stock,
        currency=currency or get_settings().default_currency,
        description=description,
        category=category,
        image_path=image_path,
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} (stock {dto.stock})")


@click.command("list")
@click.option("--category", default=None, help="Only products of this category.")
def product_list(category: str | None) -> None:
    """List all products in the catalog."""
    handler = GetAllProductsHandler(product_repo=product_repository())
    try:
        products = handler.handle(category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show details of a product."""
    handler = GetProductByIdHandler(product_repo=product_repository())
    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    click.echo(f"Product {dto.id}: {dto.name}")
    click.echo(f"  Price:           {dto.price}")
    click.echo(f"  Stock:           {dto.stock}")
    click.echo(f"  Inventory value: {dto.inventory_value}")
    if dto.category:
        click.echo(f"  Category:        {dto.category}")
    if dto.description:
        click.echo(f"  Description:     {dto.description}")
    if dto.image_url:
        click.echo(f"  Image:           {dto.image_url}")
    click.echo(f"  Updated:         {dto.updated_at}")


@click.command("search")
@click.argument("query")
def product_search(query: str) -> None:
    """Search products by name, description or category."""
    handler = SearchProductsHandler(product_repo=product_repository())
    try:
        products = handler.handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_table(products)


@click.command("low-stock")
@click.option("--include-out", is_flag=True, default=False, help="Also list sold-out products.")
def product_low_stock(include_out: bool) -> None:
    """List products that need restocking."""
    handler = GetLowStockProductsHandler(product_repo=product_repository())
    try:
        products = handler.handle(include_out_of_stock=include_out)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_table(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--currency", default=None, help="Currency of the new price.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    currency: str | None,
    description: str | None,
    category: str | None,
) -> None:
    """Update a product's catalog data."""
    handler = UpdateProductHandler(product_repo=product_repository())
    request = UpdateProductRequest(
        id=product_id,
        name=name,
        price=price,
        currency=currency,
        description=description,
        category=category,
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated: '{dto.name}' at {dto.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product from the catalog?")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())
    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
