import click

from labelkit.infrastructure.bootstrap import settings
from labelkit.infrastructure.cli.barcode_commands import (
    barcode_generate,
    barcode_print,
    barcode_scan,
    barcode_validate,
)
from labelkit.infrastructure.cli.product_commands import product_add, product_list
from labelkit.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log print job progress.")
def cli(verbose: bool) -> None:
    """labelkit: product barcodes and label printing"""
    cfg = settings()
    setup_logging(
        log_level="DEBUG" if verbose else cfg.log_level,
        log_dir=cfg.log_dir,
    )


@cli.group()
def barcode() -> None:
    """Generate, check and print barcodes."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
barcode.add_command(barcode_generate)
barcode.add_command(barcode_print)
barcode.add_command(barcode_scan)
barcode.add_command(barcode_validate)
product.add_command(product_add)
product.add_command(product_list)
