"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from dynashop.application.dto import ProductInput
from dynashop.domain.exceptions import DomainException, StorageError
from dynashop.domain.model.product import Product, ProductStatus
from dynashop.infrastructure.bootstrap import Services
from dynashop.infrastructure.cli.errors import to_click_error

STATUS_CHOICE = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


def _product_options(func):
    """Options shared by create and update (update is a full replace)."""
    options = [
        click.option("--name", required=True, help="Product name."),
        click.option("--category", required=True, help="Category (indexed)."),
        click.option("--price", required=True, help="Price (e.g. 15.00)."),
        click.option("--stock", "stock_quantity", required=True, type=int, help="Units in stock."),
        click.option("--description", default=None, help="Free-text description."),
        click.option("--manufacturer", default=None, help="Manufacturer name."),
        click.option(
            "--status",
            default=None,
            type=STATUS_CHOICE,
            help="Explicit status; derived from stock when omitted.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _display_product(product: Product) -> None:
    click.echo(f"Product {product.id}  (status={product.status.value})")
    click.echo(f"Name:         {product.name}")
    click.echo(f"Category:     {product.category}")
    click.echo(f"Price:        {product.price}")
    click.echo(f"Stock:        {product.stock_quantity}")
    if product.manufacturer:
        click.echo(f"Manufacturer: {product.manufacturer}")
    if product.description:
        click.echo(f"Description:  {product.description}")
    click.echo(f"Created:      {product.created_at}")
    click.echo(f"Updated:      {product.updated_at}")


def _display_table(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>6} Status")
    click.echo("-" * 100)
    for p in products:
        click.echo(
            f"{p.id:<36} {p.name:<20} {p.category:<14} {str(p.price):>10} "
            f"{p.stock_quantity:>6} {p.status.value}"
        )


@click.command("create")
@_product_options
@click.pass_obj
def product_create(services: Services, **fields) -> None:
    """Add a new product to the catalog."""
    try:
        product = services.products.create(ProductInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Product {product.id} '{product.name}' created (status={product.status.value})")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(services: Services, product_id: str) -> None:
    """Show details of a product."""
    try:
        product = services.products.get(product_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _display_product(product)


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--status", default=None, type=STATUS_CHOICE, help="Only products with this status.")
@click.option("--available", is_flag=True, default=False, help="Only ACTIVE products.")
@click.option("--out-of-stock", is_flag=True, default=False, help="Only OUT_OF_STOCK products.")
@click.pass_obj
def product_list(
    services: Services,
    category: str | None,
    status: str | None,
    available: bool,
    out_of_stock: bool,
) -> None:
    """List products, optionally filtered."""
    chosen = [f for f in (category is not None, status is not None, available, out_of_stock) if f]
    if len(chosen) > 1:
        raise click.UsageError(
            "Use at most one of --category, --status, --available, --out-of-stock."
        )

    try:
        if category is not None:
            products = services.products.list_by_category(category)
        elif status is not None:
            products = services.products.list_by_status(status)
        elif available:
            products = services.products.list_available()
        elif out_of_stock:
            products = services.products.list_out_of_stock()
        else:
            products = services.products.list_all()
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _display_table(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@_product_options
@click.pass_obj
def product_update(services: Services, product_id: str, **fields) -> None:
    """Replace every field of an existing product."""
    try:
        product = services.products.update(product_id, ProductInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Product {product.id} updated (status={product.status.value})")


@click.command("set-status")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--status", required=True, type=STATUS_CHOICE, help="New status.")
@click.pass_obj
def product_set_status(services: Services, product_id: str, status: str) -> None:
    """Set a product's status by hand."""
    try:
        product = services.products.update_status(product_id, status)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Product {product.id} status set to {product.status.value}")


def _report_stock(product: Product) -> None:
    click.echo(
        f"Product {product.id} stock is now {product.stock_quantity} "
        f"(status={product.status.value})"
    )


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Signed change, negative to remove.")
@click.pass_obj
def product_adjust(services: Services, product_id: str, quantity: int) -> None:
    """Apply a signed change to a product's stock."""
    try:
        product = services.products.adjust_stock(product_id, quantity)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _report_stock(product)


@click.command("reduce")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
@click.pass_obj
def product_reduce(services: Services, product_id: str, quantity: int) -> None:
    """Remove units from a product's stock."""
    try:
        product = services.products.reduce_stock(product_id, quantity)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _report_stock(product)


@click.command("increase")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def product_increase(services: Services, product_id: str, quantity: int) -> None:
    """Add units to a product's stock."""
    try:
        product = services.products.increase_stock(product_id, quantity)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _report_stock(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(services: Services, product_id: str) -> None:
    """Delete a product."""
    try:
        services.products.delete(product_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Product {product_id} deleted.")
