"""Application service: Generate Barcode use case (query).

Generation is a pure function of the identity, so nothing is looked
up or persisted here.
"""

from __future__ import annotations

from labelkit.application.dto import BarcodeDTO
from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.identity import BarcodeIdentity
from labelkit.domain.service.code_generator import generate_code


class GenerateBarcodeHandler:

    def handle(self, product_id: str, vendor_id: str) -> BarcodeDTO:
        if product_id is None or vendor_id is None:
            raise ValidationError("Both product ID and vendor ID are required")

        code = generate_code(BarcodeIdentity(product_id=product_id, vendor_id=vendor_id))
        return BarcodeDTO(product_id=product_id, vendor_id=vendor_id, barcode=str(code))
