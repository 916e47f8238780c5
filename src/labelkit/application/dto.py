"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from labelkit.domain.model.product import Product


@dataclass(frozen=True)
class BarcodeDTO:
    """Output: a generated barcode and the identity it came from."""

    product_id: str
    vendor_id: str
    barcode: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product as displayed to the user."""

    id: str
    vendor_id: str
    name: str
    price: str  # formatted, e.g. "1.500 OMR"
    barcode: str | None

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            vendor_id=product.vendor_id,
            name=product.name,
            price=product.price.label(),
            barcode=str(product.barcode) if product.barcode else None,
        )
