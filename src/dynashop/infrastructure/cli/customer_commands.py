"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from dynashop.application.dto import CustomerInput
from dynashop.domain.exceptions import DomainException, StorageError
from dynashop.infrastructure.bootstrap import Services
from dynashop.infrastructure.cli.errors import to_click_error


def _customer_options(func):
    options = [
        click.option("--email", required=True, help="Email address."),
        click.option("--first-name", required=True, help="First name."),
        click.option("--last-name", required=True, help="Last name."),
        click.option("--phone", default=None, help="Phone number."),
        click.option("--address", default=None, help="Postal address."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("create")
@_customer_options
@click.pass_obj
def customer_create(services: Services, **fields) -> None:
    """Register a new customer."""
    try:
        customer = services.customers.create(CustomerInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Customer {customer.id} '{customer.full_name}' created")


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_show(services: Services, customer_id: str) -> None:
    """Show details of a customer."""
    try:
        customer = services.customers.get(customer_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Customer {customer.id}")
    click.echo(f"Name:    {customer.full_name}")
    click.echo(f"Email:   {customer.email}")
    click.echo(f"Phone:   {customer.phone or '-'}")
    click.echo(f"Address: {customer.address or '-'}")
    click.echo(f"Created: {customer.created_at}")


@click.command("list")
@click.pass_obj
def customer_list(services: Services) -> None:
    """List all customers."""
    try:
        customers = services.customers.list_all()
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<36} {'Name':<30} Email")
    click.echo("-" * 90)
    for c in customers:
        click.echo(f"{c.id:<36} {c.full_name:<30} {c.email}")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@_customer_options
@click.pass_obj
def customer_update(services: Services, customer_id: str, **fields) -> None:
    """Replace every field of an existing customer."""
    try:
        customer = services.customers.update(customer_id, CustomerInput(**fields))
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Customer {customer.id} updated")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_delete(services: Services, customer_id: str) -> None:
    """Delete a customer. Their orders are left in place."""
    try:
        services.customers.delete(customer_id)
    except (DomainException, StorageError) as exc:
        raise to_click_error(exc)

    click.echo(f"Customer {customer_id} deleted.")
