"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from barber.application.dto import ProductRequest
from barber.domain.exceptions import DomainException
from barber.domain.model.product import Product
from barber.infrastructure.bootstrap import product_service


def _display_product(product: Product) -> None:
    click.echo(f"Product #{product.id}  {product.name}")
    click.echo(f"Price:       {product.price}")
    if product.description:
        click.echo(f"Description: {product.description}")
    click.echo(f"Updated:     {product.updated_at:%Y-%m-%d %H:%M %Z}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Optional description.")
def product_add(name: str, price: str, description: str) -> None:
    """Add a new product to the catalog."""
    try:
        product = product_service().create(ProductRequest(name, price, description))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_service().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    try:
        product = product_service().get_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--description", default="", help="New description.")
def product_update(product_id: int, name: str, price: str, description: str) -> None:
    """Replace a product's name, price and description."""
    try:
        product = product_service().update(
            product_id, ProductRequest(name, price, description)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        product_service().delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
