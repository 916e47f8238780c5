"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from labelkit.application.add_product import AddProductHandler
from labelkit.domain.exceptions import DomainException
from labelkit.infrastructure.bootstrap import product_repository, settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 1.500).")
@click.option("--vendor", "vendor_id", required=True, help="Vendor ID.")
@click.option("--barcode", default=None, help="Existing 13-digit barcode. Generated if omitted.")
def product_add(name: str, price: str, vendor_id: str, barcode: str | None) -> None:
    """Add a new vendor product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(), currency=settings().currency
    )

    try:
        product = handler.handle(
            name=name, price=price, vendor_id=vendor_id, barcode=barcode
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"with barcode {product.barcode}"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Vendor':<10} {'Name':<20} {'Price':>12} {'Barcode':>14}")
    click.echo("-" * 66)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.vendor_id:<10} {p.name:<20} {str(p.price):>12} "
            f"{str(p.barcode or '-'):>14}"
        )
