import click

from shop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_create,
    cart_delete,
    cart_list,
    cart_remove,
    cart_set,
    cart_show,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from shop.infrastructure.config import ShopSettings
from shop.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Shop — product catalog and shopping carts"""
    settings = ShopSettings()
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage carts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_create)
cart.add_command(cart_delete)
cart.add_command(cart_list)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
