"""Application service: Add Product use case."""

from __future__ import annotations

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.product import Product
from labelkit.domain.model.value_objects import DEFAULT_CURRENCY, BarcodeCode, Money
from labelkit.domain.repository.product_repository import ProductRepository
from labelkit.domain.service.code_generator import generate_code


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        price: str,
        vendor_id: str,
        barcode: str | None = None,
    ) -> Product:
        """Add a new vendor product to the catalog.

        Products added without a barcode get the one generated from
        their (product, vendor) identity.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not vendor_id or not vendor_id.strip():
            raise ValidationError("Vendor ID is required")

        # Auto-assign ID based on existing numeric IDs; imported catalogs
        # may also carry UUIDs, which are skipped
        numeric_ids = [
            int(p.id) for p in self._product_repo.list_all() if p.id.isdecimal()
        ]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            vendor_id=vendor_id.strip(),
            name=name.strip(),
            price=Money.of(price, self._currency),
        )

        code = BarcodeCode(barcode.strip()) if barcode else generate_code(product.identity)
        owner = self._product_repo.get_by_barcode(str(code))
        if owner is not None:
            raise ValidationError(
                f"Barcode {code} is already used by product #{owner.id} '{owner.name}'"
            )
        product.assign_barcode(code)

        self._product_repo.save(product)
        return product
