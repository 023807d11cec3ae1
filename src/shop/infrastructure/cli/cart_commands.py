"""CLI commands for carts."""

from __future__ import annotations

import click

from shop.application.add_to_cart import AddToCartHandler
from shop.application.dto import CartDTO
from shop.application.show_cart import ShowCartHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.cart import Cart
from shop.infrastructure.bootstrap import cart_store, product_store
from shop.infrastructure.config import ShopSettings


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart #{dto.id}")
    if not dto.lines:
        click.echo("  (empty)")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for line in dto.lines:
        price = line.unit_price if line.available else "-"
        total = line.line_total if line.available else "-"
        click.echo(
            f"  {line.product_id:<6} {line.title:<20} {line.quantity:>5} {price:>10} {total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Cart Total':<33} {dto.total:>20}")


def _summary(cart: Cart) -> str:
    return f"Cart #{cart.id}: {len(cart.products)} line(s), {cart.total_quantity} item(s)"


@click.command("create")
@click.pass_obj
def cart_create(settings: ShopSettings) -> None:
    """Create a new, empty cart."""
    try:
        cart = cart_store(settings).create()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart.id} created.")


@click.command("list")
@click.pass_obj
def cart_list(settings: ShopSettings) -> None:
    """List all carts."""
    carts = cart_store(settings).list_all()

    if not carts:
        click.echo("No carts found.")
        return

    for cart in carts:
        click.echo(_summary(cart))


@click.command("show")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID to display.")
@click.pass_obj
def cart_show(settings: ShopSettings, cart_id: int) -> None:
    """Show a cart with product details."""
    handler = ShowCartHandler(
        cart_store=cart_store(settings),
        product_store=product_store(settings),
    )

    try:
        dto = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", type=click.IntRange(min=1), default=1, show_default=True, help="Units to add.")
@click.pass_obj
def cart_add(settings: ShopSettings, cart_id: int, product_id: int, quantity: int) -> None:
    """Add a product to a cart (merges with an existing line)."""
    handler = AddToCartHandler(
        cart_store=cart_store(settings),
        product_store=product_store(settings),
    )

    try:
        cart = handler.handle(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    line = cart.find_item(product_id)
    click.echo(f"Cart #{cart.id}: product {product_id} quantity is now {line.quantity}")


@click.command("set")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="New quantity.")
@click.pass_obj
def cart_set(settings: ShopSettings, cart_id: int, product_id: int, quantity: int) -> None:
    """Set the quantity of a product already in a cart."""
    try:
        cart = cart_store(settings).set_product_quantity(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(_summary(cart))


@click.command("remove")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(settings: ShopSettings, cart_id: int, product_id: int) -> None:
    """Remove a product from a cart."""
    try:
        cart = cart_store(settings).remove_product(cart_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(_summary(cart))


@click.command("delete")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.pass_obj
def cart_delete(settings: ShopSettings, cart_id: int) -> None:
    """Delete a cart."""
    try:
        cart_store(settings).delete(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart_id} deleted.")
