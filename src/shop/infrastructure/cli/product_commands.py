"""CLI commands for products."""

from __future__ import annotations

import json
from typing import Any

import click

from shop.application.list_products import ListProductsHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.product import TEXT_FIELDS, Product
from shop.infrastructure.bootstrap import product_store
from shop.infrastructure.config import ShopSettings


def _parse_assignments(raw: tuple[str, ...]) -> dict[str, Any]:
    """Parse ('price=12.5', 'title=Lamp') into a patch dict.

    Text fields keep the raw string. Other values are read as JSON where
    possible, otherwise kept as strings.
    """
    patch: dict[str, Any] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid assignment '{pair}'. Expected 'field=value'."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if key in TEXT_FIELDS:
            patch[key] = value
            continue
        try:
            patch[key] = json.loads(value)
        except ValueError:
            patch[key] = value
    return patch


def _display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}  (code={p.code})")
    click.echo(f"Title:       {p.title}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"Stock:       {p.stock}")
    click.echo(f"Status:      {'active' if p.status else 'inactive'}")
    if p.thumbnails:
        click.echo(f"Thumbnails:  {', '.join(p.thumbnails)}")


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--category", required=True, help="Product category.")
@click.option("--thumbnail", "thumbnails", multiple=True, help="Thumbnail path; repeatable.")
@click.option("--status/--no-status", default=True, help="Whether the product is active.")
@click.pass_obj
def product_add(
    settings: ShopSettings,
    title: str,
    description: str,
    code: str,
    price: float,
    stock: int,
    category: str,
    thumbnails: tuple[str, ...],
    status: bool,
) -> None:
    """Add a new product to the catalog."""
    store = product_store(settings)

    try:
        product = store.create(
            {
                "title": title,
                "description": description,
                "code": code,
                "price": price,
                "stock": stock,
                "category": category,
                "thumbnails": list(thumbnails),
                "status": status,
            }
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added (code={product.code})")


@click.command("list")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Products per page.")
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number.")
@click.pass_obj
def product_list(settings: ShopSettings, limit: int | None, page: int) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_store=product_store(settings))

    try:
        result = handler.handle(limit=limit, page=page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<10} {'Title':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 56)
    for p in result.items:
        click.echo(f"{p.id:<6} {p.code:<10} {p.title:<20} {p.price:>10} {p.stock:>6}")

    if limit is not None:
        click.echo(f"Page {result.page} of {result.total_pages}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: ShopSettings, product_id: int) -> None:
    """Show a single product."""
    try:
        product = product_store(settings).get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--set", "assignments", required=True, multiple=True, help="Field to change as 'field=value'; repeatable.")
@click.pass_obj
def product_update(
    settings: ShopSettings, product_id: int, assignments: tuple[str, ...]
) -> None:
    """Update fields of an existing product."""
    patch = _parse_assignments(assignments)

    try:
        product = product_store(settings).update(product_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: {', '.join(sorted(patch))}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: ShopSettings, product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        product_store(settings).delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
