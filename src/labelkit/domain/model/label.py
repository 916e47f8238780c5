"""Label payload handed to the print orchestrator."""

from __future__ import annotations

from dataclasses import dataclass

from labelkit.domain.model.value_objects import BarcodeCode, Money


@dataclass(frozen=True)
class LabelData:
    """What ends up on the physical label. Built per print request."""

    code: BarcodeCode
    name: str
    price: Money
