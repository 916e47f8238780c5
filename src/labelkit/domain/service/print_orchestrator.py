"""Print Orchestrator: drives one label through a render surface.

Each ``print_label`` call owns its PrintJob and its surface handle, so
any number of calls can be in flight at once without coordination.
The lifecycle is strictly linear:

    CREATED -> SURFACE_OPENED -> CONTENT_LOADED -> ASSETS_READY
            -> RENDERED -> PRINTED -> COMPLETED

with FAILED reachable when the surface cannot be opened, the document
cannot be loaded, or the print command raises. Once opened, the surface
is closed exactly once on every exit path.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from labelkit.domain.exceptions import (
    PrintCommandFailed,
    PrintJobError,
    SurfaceUnavailable,
)
from labelkit.domain.model.label import LabelData
from labelkit.domain.model.print_job import PrintJob, PrintJobState
from labelkit.domain.surface.render_surface import RenderSurface, SurfaceHandle

logger = logging.getLogger(__name__)

# Seconds
SETTLE_DELAY = 0.5
FALLBACK_TIMEOUT = 1.0
ASSET_TIMEOUT = 5.0


class PrintOrchestrator:
    """Prints labels on a render surface.

    Args:
        surface: Where labels are opened and printed.
        render_document: Turns a LabelData into the document the surface
            loads (HTML for the file surface).
        settle_delay: Fixed wait between assets being ready and printing.
        fallback_timeout: How long to wait for the after-print signal
            before treating the job as completed anyway.
        asset_timeout: Upper bound on the asset-ready wait. None waits
            for as long as the surface takes.
    """

    def __init__(
        self,
        surface: RenderSurface,
        render_document: Callable[[LabelData], str],
        settle_delay: float = SETTLE_DELAY,
        fallback_timeout: float = FALLBACK_TIMEOUT,
        asset_timeout: float | None = ASSET_TIMEOUT,
    ) -> None:
        self._surface = surface
        self._render_document = render_document
        self._settle_delay = settle_delay
        self._fallback_timeout = fallback_timeout
        self._asset_timeout = asset_timeout

    async def print_label(self, data: LabelData) -> bool:
        """Print one label. Returns True on completion.

        Raises:
            SurfaceUnavailable: the surface could not be opened.
            PrintCommandFailed: the print command (or the completion it
                reported) failed.
            PrintJobError: the document could not be loaded.
        """
        job = PrintJob(data=data)
        logger.info("Printing label %s for '%s'", data.code, data.name)

        async with self._opened_surface(job) as handle:
            await self._load(job, handle)
            await self._wait_for_assets(job, handle)

            await asyncio.sleep(self._settle_delay)
            self._advance(job, PrintJobState.RENDERED)

            await self._issue_print(job, handle)
            await self._wait_for_completion(job, handle)

        logger.info("Label %s printed", data.code)
        return job.succeeded

    # --- Stages ---------------------------------------------------------------

    @asynccontextmanager
    async def _opened_surface(self, job: PrintJob) -> AsyncIterator[SurfaceHandle]:
        cause: Exception | None = None
        try:
            handle = await self._surface.open()
        except Exception as exc:
            handle = None
            cause = exc

        if handle is None:
            raise self._fail(
                job, SurfaceUnavailable, "Render surface unavailable"
            ) from cause

        self._advance(job, PrintJobState.SURFACE_OPENED)
        try:
            yield handle
        finally:
            handle.close()
            logger.debug("Surface closed for %s", job.data.code)

    async def _load(self, job: PrintJob, handle: SurfaceHandle) -> None:
        try:
            await handle.load(self._render_document(job.data))
        except Exception as exc:
            raise self._fail(
                job, PrintJobError, f"Could not load label document: {exc}"
            ) from exc
        self._advance(job, PrintJobState.CONTENT_LOADED)

    async def _wait_for_assets(self, job: PrintJob, handle: SurfaceHandle) -> None:
        try:
            await asyncio.wait_for(handle.assets_ready(), self._asset_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Assets for %s not ready after %.1fs, printing anyway",
                job.data.code,
                self._asset_timeout,
            )
        except Exception as exc:
            logger.warning(
                "Asset readiness failed for %s, printing anyway: %s",
                job.data.code,
                exc,
            )
        self._advance(job, PrintJobState.ASSETS_READY)

    async def _issue_print(self, job: PrintJob, handle: SurfaceHandle) -> None:
        try:
            await handle.print()
        except Exception as exc:
            raise self._fail(
                job, PrintCommandFailed, f"Print command failed: {exc}"
            ) from exc
        self._advance(job, PrintJobState.PRINTED)

    async def _wait_for_completion(self, job: PrintJob, handle: SurfaceHandle) -> None:
        # First of after-print signal and fallback timer wins.
        try:
            await asyncio.wait_for(handle.after_print(), self._fallback_timeout)
        except asyncio.TimeoutError:
            logger.info(
                "No after-print signal for %s within %.1fs, assuming printed",
                job.data.code,
                self._fallback_timeout,
            )
        except Exception as exc:
            raise self._fail(
                job, PrintCommandFailed, f"Printing did not complete: {exc}"
            ) from exc
        self._advance(job, PrintJobState.COMPLETED)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _advance(job: PrintJob, target: PrintJobState) -> None:
        job.advance(target)
        logger.debug("Label %s -> %s", job.data.code, target.value)

    @staticmethod
    def _fail(
        job: PrintJob, error_type: type[PrintJobError], message: str
    ) -> PrintJobError:
        error = error_type(message, stage=job.state, code=str(job.data.code))
        job.fail(error)
        logger.error("Label %s failed: %s", job.data.code, error)
        return error
