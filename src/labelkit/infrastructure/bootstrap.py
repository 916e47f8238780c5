"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from labelkit.domain.service.print_orchestrator import PrintOrchestrator
from labelkit.infrastructure.config import Settings
from labelkit.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from labelkit.infrastructure.rendering.html_label import HtmlLabelRenderer
from labelkit.infrastructure.surface.file_surface import FileRenderSurface


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def print_orchestrator() -> PrintOrchestrator:
    cfg = settings()
    return PrintOrchestrator(
        surface=FileRenderSurface(cfg.output_dir, cfg.print_command),
        render_document=HtmlLabelRenderer(),
        settle_delay=cfg.settle_delay,
        fallback_timeout=cfg.fallback_timeout,
        asset_timeout=cfg.asset_timeout,
    )
