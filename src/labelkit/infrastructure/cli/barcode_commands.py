"""CLI commands for generating, checking and printing barcodes."""

from __future__ import annotations

import asyncio

import click

from labelkit.application.generate_barcode import GenerateBarcodeHandler
from labelkit.application.print_label import PrintLabelHandler
from labelkit.application.scan_barcode import ScanBarcodeHandler
from labelkit.domain.exceptions import DomainException, PrintJobError
from labelkit.domain.service.code_generator import is_valid_code
from labelkit.infrastructure.bootstrap import print_orchestrator, product_repository


@click.command("generate")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--vendor-id", required=True, help="Vendor ID.")
def barcode_generate(product_id: str, vendor_id: str) -> None:
    """Show the barcode for a product/vendor pair."""
    try:
        dto = GenerateBarcodeHandler().handle(product_id=product_id, vendor_id=vendor_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.barcode)


@click.command("validate")
@click.argument("code")
def barcode_validate(code: str) -> None:
    """Check a 13-digit code's check digit."""
    if not is_valid_code(code.strip()):
        raise click.ClickException(f"{code} is not a valid barcode")
    click.echo(f"{code} is valid")


@click.command("scan")
@click.argument("code")
def barcode_scan(code: str) -> None:
    """Look up the product carrying a barcode."""
    handler = ScanBarcodeHandler(product_repo=product_repository())

    try:
        product = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}: {product.name}")
    click.echo(f"  Vendor:  {product.vendor_id}")
    click.echo(f"  Price:   {product.price}")
    click.echo(f"  Barcode: {product.barcode}")


@click.command("print")
@click.option("--id", "product_id", required=True, help="Product ID.")
def barcode_print(product_id: str) -> None:
    """Print the barcode label of a product."""
    handler = PrintLabelHandler(
        product_repo=product_repository(),
        orchestrator=print_orchestrator(),
    )

    try:
        asyncio.run(handler.handle(product_id))
    except PrintJobError as exc:
        raise click.ClickException(f"{exc}. Check the printer and try again.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Label for product #{product_id} printed")
