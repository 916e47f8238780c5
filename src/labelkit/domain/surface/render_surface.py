"""Abstract render surface: the host-provided target a label is printed from.

Defined in the domain layer so the orchestrator never depends on how a
label is actually shown or printed. Concrete surfaces live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SurfaceHandle(ABC):
    """One opened surface, exclusively owned by a single print job."""

    @abstractmethod
    async def load(self, document: str) -> None:
        """Write *document* and return once the surface reports it loaded."""

    @abstractmethod
    async def assets_ready(self) -> None:
        """Return once fonts and other visual assets are ready."""

    @abstractmethod
    async def print(self) -> None:
        """Issue the print command. May raise."""

    @abstractmethod
    async def after_print(self) -> None:
        """Return when the surface reports printing finished.

        Surfaces that never report completion may simply never return.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the surface. Closing twice must be a no-op."""


class RenderSurface(ABC):

    @abstractmethod
    async def open(self) -> SurfaceHandle | None:
        """Open a fresh handle, or return None if the host refuses."""
