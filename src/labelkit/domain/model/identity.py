"""Identity tuple that seeds barcode generation."""

from __future__ import annotations

from dataclasses import dataclass

IDENTITY_SEPARATOR = "-"


@dataclass(frozen=True)
class BarcodeIdentity:
    """A vendor-assigned product, identified by ``(product_id, vendor_id)``.

    Supplied by the caller and never persisted here. Two equal identities
    always map to the same code.
    """

    product_id: str
    vendor_id: str

    @property
    def key(self) -> str:
        return f"{self.product_id}{IDENTITY_SEPARATOR}{self.vendor_id}"
