"""Application service: Scan Barcode use case (query).

Resolves a scanned code to the catalog product carrying it, the way
the point-of-sale scanner looks products up.
"""

from __future__ import annotations

from labelkit.application.dto import ProductDTO
from labelkit.domain.exceptions import EntityNotFoundError
from labelkit.domain.model.value_objects import BarcodeCode
from labelkit.domain.repository.product_repository import ProductRepository


class ScanBarcodeHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, scanned: str) -> ProductDTO:
        # Scanners append a newline/CR after the digits
        code = BarcodeCode(scanned.strip())

        product = self._product_repo.get_by_barcode(str(code))
        if product is None:
            raise EntityNotFoundError(f"No product with barcode {code}")
        return ProductDTO.from_product(product)
