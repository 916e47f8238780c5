"""Render surface backed by label files and an optional print command.

Each handle writes its document to its own file in the output
directory, so concurrent jobs never share a file. Printing runs the
configured command (e.g. ``lp -d zebra``) with the label file appended;
the command exiting cleanly is the after-print signal. Without a
command the surface runs in preview mode and printing completes
immediately.

An issued print command is never stopped by the surface. When the
orchestrator's fallback completes a job first, closing the handle
leaves the command running and reaps it on a background thread.
"""

from __future__ import annotations

import asyncio
import subprocess
import threading
from pathlib import Path
from uuid import uuid4

from labelkit.domain.surface.render_surface import RenderSurface, SurfaceHandle
from labelkit.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

# Seconds between exit checks while waiting for the print command
POLL_INTERVAL = 0.05


class PrintCommandError(RuntimeError):
    """The print command exited with a non-zero status."""


class FileSurfaceHandle(SurfaceHandle):

    def __init__(self, path: Path, print_command: tuple[str, ...]) -> None:
        self.path = path
        self._print_command = print_command
        self._process: subprocess.Popen | None = None
        self._closed = False

    async def load(self, document: str) -> None:
        await asyncio.to_thread(self.path.write_text, document, encoding="utf-8")
        logger.debug("Label document written to %s", self.path)

    async def assets_ready(self) -> None:
        # Fonts are resolved by whatever finally renders the file.
        return None

    async def print(self) -> None:
        if not self._print_command:
            logger.info("Preview mode, label saved at %s", self.path)
            return
        # Popen, not an asyncio subprocess: the command must outlive the
        # event loop when the fallback ends the job before it exits.
        self._process = subprocess.Popen(
            [*self._print_command, str(self.path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )

    async def after_print(self) -> None:
        if self._process is None:
            return
        while self._process.poll() is None:
            await asyncio.sleep(POLL_INTERVAL)
        stderr = self._process.stderr.read()
        self._process.stderr.close()
        self._check_exit(self._process.returncode, stderr)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._process is None:
            return
        if self._process.poll() is None:
            logger.info(
                "Print command for %s still running, leaving it to finish", self.path
            )
            threading.Thread(
                target=self._reap,
                name=f"reap-{self._process.pid}",
                daemon=True,
            ).start()
        elif not self._process.stderr.closed:
            self._process.stderr.close()

    # --- Internal helpers -----------------------------------------------------

    def _reap(self) -> None:
        _, stderr = self._process.communicate()
        try:
            self._check_exit(self._process.returncode, stderr)
        except PrintCommandError as exc:
            logger.error("Print of %s failed after completion: %s", self.path, exc)

    def _check_exit(self, returncode: int, stderr: bytes) -> None:
        if returncode != 0:
            raise PrintCommandError(
                f"{self._print_command[0]} exited with status "
                f"{returncode}: {stderr.decode(errors='replace').strip()}"
            )


class FileRenderSurface(RenderSurface):

    def __init__(self, output_dir: Path, print_command: tuple[str, ...] = ()) -> None:
        self._output_dir = output_dir
        self._print_command = print_command

    async def open(self) -> FileSurfaceHandle | None:
        path = self._output_dir / f"label-{uuid4().hex[:12]}.html"
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            # Reserve the file now so an unwritable directory fails the open
            path.touch(exist_ok=False)
        except OSError as exc:
            logger.error("Cannot use label directory %s: %s", self._output_dir, exc)
            return None

        return FileSurfaceHandle(path, self._print_command)
