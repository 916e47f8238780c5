"""Application service: Print Label use case.

Looks the product up, makes sure it has a barcode, and hands the label
to the print orchestrator. Print errors are not retried here; the
caller decides whether to try again.
"""

from __future__ import annotations

from labelkit.domain.exceptions import EntityNotFoundError
from labelkit.domain.model.label import LabelData
from labelkit.domain.repository.product_repository import ProductRepository
from labelkit.domain.service.code_generator import generate_code
from labelkit.domain.service.print_orchestrator import PrintOrchestrator


class PrintLabelHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        orchestrator: PrintOrchestrator,
    ) -> None:
        self._product_repo = product_repo
        self._orchestrator = orchestrator

    async def handle(self, product_id: str) -> bool:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Stable across calls: regenerating gives the same code
        code = product.barcode or generate_code(product.identity)

        label = LabelData(code=code, name=product.name, price=product.price)
        return await self._orchestrator.print_label(label)
