"""Product aggregate.

Products are owned by the catalog, not by the label core. A product is
always sold by one vendor; together they form the barcode identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.identity import BarcodeIdentity
from labelkit.domain.model.value_objects import BarcodeCode, Money


@dataclass
class Product:
    """A vendor product in the catalog.

    ``barcode`` is None until one is assigned; products added before
    barcodes were generated automatically may still lack one.
    """

    id: str
    vendor_id: str
    name: str
    price: Money
    barcode: BarcodeCode | None = None

    @property
    def identity(self) -> BarcodeIdentity:
        return BarcodeIdentity(product_id=self.id, vendor_id=self.vendor_id)

    def assign_barcode(self, code: BarcodeCode) -> None:
        """Attach a barcode. An existing barcode is never replaced."""
        if self.barcode is not None and self.barcode != code:
            raise ValidationError(
                f"Product '{self.name}' already has barcode {self.barcode}"
            )
        self.barcode = code
