"""PrintJob: the per-invocation state of a label print.

A job only ever moves forward through PrintJobState. It is owned by the
orchestrator call that created it and discarded when that call returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.label import LabelData


class PrintJobState(Enum):
    CREATED = "CREATED"
    SURFACE_OPENED = "SURFACE_OPENED"
    CONTENT_LOADED = "CONTENT_LOADED"
    ASSETS_READY = "ASSETS_READY"
    RENDERED = "RENDERED"
    PRINTED = "PRINTED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


# Linear lifecycle; FAILED is reachable from any non-terminal state.
_SEQUENCE = [
    PrintJobState.CREATED,
    PrintJobState.SURFACE_OPENED,
    PrintJobState.CONTENT_LOADED,
    PrintJobState.ASSETS_READY,
    PrintJobState.RENDERED,
    PrintJobState.PRINTED,
    PrintJobState.COMPLETED,
]

TERMINAL_STATES = frozenset({PrintJobState.COMPLETED, PrintJobState.FAILED})


@dataclass
class PrintJob:
    data: LabelData
    state: PrintJobState = PrintJobState.CREATED
    error: Exception | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def succeeded(self) -> bool:
        return self.state == PrintJobState.COMPLETED

    # --- State transitions ----------------------------------------------------

    def advance(self, target: PrintJobState) -> None:
        """Move to the next state in the lifecycle.

        Only the immediate successor of the current state is accepted;
        skipping ahead or going back raises ValidationError.
        """
        if target == PrintJobState.FAILED:
            raise ValidationError("Use fail() to move a print job to FAILED")
        if self.is_terminal:
            raise ValidationError(
                f"Print job already finished in {self.state.value}"
            )
        expected = _SEQUENCE[_SEQUENCE.index(self.state) + 1]
        if target != expected:
            raise ValidationError(
                f"Cannot move print job from {self.state.value} to "
                f"{target.value}, expected {expected.value}"
            )
        self.state = target

    def fail(self, error: Exception) -> None:
        """Transition any non-terminal state -> FAILED."""
        if self.is_terminal:
            raise ValidationError(
                f"Print job already finished in {self.state.value}"
            )
        self.state = PrintJobState.FAILED
        self.error = error
