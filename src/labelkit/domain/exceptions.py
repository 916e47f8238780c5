"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Print failures carry the job stage they happened in, so callers can tell
an unavailable surface apart from a rejected print command.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PrintJobError(DomainException):
    """A print job ended in the FAILED state."""

    def __init__(self, message: str, stage: Any, code: str | None = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.code = code

    def __str__(self) -> str:
        stage = getattr(self.stage, "value", self.stage)
        return f"{self.args[0]} (stage: {stage})"


class SurfaceUnavailable(PrintJobError):
    """The render surface could not be opened. Not retried."""


class PrintCommandFailed(PrintJobError):
    """The surface opened and loaded, but the print command raised."""
