"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from dynashop.application.dto import OrderInput
from dynashop.domain.exceptions import DomainException, StorageError
from dynashop.domain.model.order import Order, OrderStatus
from dynashop.infrastructure.bootstrap import Services
from dynashop.infrastructure.cli.errors import to_click_error

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _order_options(func):
    options = [
        click.option("--customer", "customer_id", required=True, help="Customer ID."),
        click.option("--product", "product_name", required=True, help="Product name."),
        click.option("--quantity", required=True, type=int, help="Units ordered."),
        click.option("--total", "total_amount", required=True, help="Order total (e.g. 45.00)."),
        click.option("--status", default=None, type=STATUS_CHOICE, help="Order status."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {order.id}  (status={order.status.value})")
    click.echo(f"Customer: {order.customer_id}")
    click.echo(f"Product:  {order.product_name} x {order.quantity}")
    click.echo(f"Total:    {order.total_amount}")
    click.echo(f"Created:  {order.created_at}")


@click.command("create")
@_order_options
@click.pass_obj
def order_create(services: Services, **fields) -> None:
    """Place a new order."""
    try:
        order = services.orders.create(OrderInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Order {order.id} created  (status={order.status.value})")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(services: Services, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        order = services.orders.get(order_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    _display_order(order)


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.pass_obj
def order_list(services: Services, customer_id: str | None) -> None:
    """List orders."""
    try:
        if customer_id is not None:
            orders = services.orders.list_by_customer(customer_id)
        else:
            orders = services.orders.list_all()
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36} {'Customer':<36} {'Product':<20} {'Qty':>5} {'Total':>10} Status")
    click.echo("-" * 120)
    for o in orders:
        click.echo(
            f"{o.id:<36} {o.customer_id:<36} {o.product_name:<20} {o.quantity:>5} "
            f"{str(o.total_amount):>10} {o.status.value}"
        )


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@_order_options
@click.pass_obj
def order_update(services: Services, order_id: str, **fields) -> None:
    """Replace every field of an existing order."""
    try:
        order = services.orders.update(order_id, OrderInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Order {order.id} updated  (status={order.status.value})")


@click.command("set-status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, type=STATUS_CHOICE, help="New status.")
@click.pass_obj
def order_set_status(services: Services, order_id: str, status: str) -> None:
    """Move an order to another status."""
    try:
        order = services.orders.update_status(order_id, status)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Order {order.id} status set to {order.status.value}")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_delete(services: Services, order_id: str) -> None:
    """Delete an order."""
    try:
        services.orders.delete(order_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Order {order_id} deleted.")
