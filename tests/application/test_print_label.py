"""Integration tests for the PrintLabel use case."""

import asyncio

import pytest

from labelkit.application.print_label import PrintLabelHandler
from labelkit.domain.exceptions import (
    EntityNotFoundError,
    PrintCommandFailed,
    SurfaceUnavailable,
)
from labelkit.domain.model.product import Product
from labelkit.domain.model.value_objects import BarcodeCode, Money
from labelkit.domain.service.print_orchestrator import PrintOrchestrator
from tests.fakes import FakeProductRepository, FakeRenderSurface, FakeSurfaceHandle


def _setup(handles=None, available=True):
    repo = FakeProductRepository(
        [
            Product(
                id="1",
                vendor_id="v1",
                name="Bread",
                price=Money.of("0.350"),
                barcode=BarcodeCode("4006381333931"),
            ),
            Product(id="abc123", vendor_id="v1", name="Milk", price=Money.of("0.6")),
        ]
    )
    surface = FakeRenderSurface(handles, available=available)
    orchestrator = PrintOrchestrator(
        surface=surface,
        render_document=lambda data: f"{data.code}|{data.name}|{data.price.label()}",
        settle_delay=0.0,
        fallback_timeout=0.05,
    )
    return PrintLabelHandler(repo, orchestrator), surface


def test_prints_stored_barcode():
    handler, surface = _setup()
    assert asyncio.run(handler.handle("1")) is True
    assert surface.opened[0].documents == ["4006381333931|Bread|0.350 OMR"]


def test_product_without_barcode_uses_generated_code():
    handler, surface = _setup()
    assert asyncio.run(handler.handle("abc123")) is True
    assert surface.opened[0].documents == ["0011135808409|Milk|0.600 OMR"]


def test_unknown_product():
    handler, _ = _setup()
    with pytest.raises(EntityNotFoundError, match="'99' not found"):
        asyncio.run(handler.handle("99"))


def test_surface_unavailable_propagates():
    handler, _ = _setup(available=False)
    with pytest.raises(SurfaceUnavailable):
        asyncio.run(handler.handle("1"))


def test_print_failure_propagates_after_close():
    handle = FakeSurfaceHandle(print_error=OSError("out of labels"))
    handler, _ = _setup(handles=[handle])
    with pytest.raises(PrintCommandFailed, match="out of labels"):
        asyncio.run(handler.handle("1"))
    assert handle.close_calls == 1
