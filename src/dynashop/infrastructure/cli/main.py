import click

from dynashop.infrastructure.bootstrap import services_from_settings
from dynashop.infrastructure.cli.customer_commands import (
    customer_create,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from dynashop.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_set_status,
    order_show,
    order_update,
)
from dynashop.infrastructure.cli.product_commands import (
    product_adjust,
    product_create,
    product_delete,
    product_increase,
    product_list,
    product_reduce,
    product_set_status,
    product_show,
    product_update,
)
from dynashop.infrastructure.config import Settings
from dynashop.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Log level (overrides DYNASHOP_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """dynashop: customers, orders and product inventory on DynamoDB."""
    settings = Settings()
    configure_logging(log_level or settings.log_level, json=settings.log_json)
    # Tests hand in prebuilt services through ``obj``.
    if ctx.obj is None:
        ctx.obj = services_from_settings(settings)


@cli.group()
def product() -> None:
    """Manage products and stock."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
product.add_command(product_adjust)
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_increase)
product.add_command(product_list)
product.add_command(product_reduce)
product.add_command(product_set_status)
product.add_command(product_show)
product.add_command(product_update)
customer.add_command(customer_create)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_set_status)
order.add_command(order_show)
order.add_command(order_update)
