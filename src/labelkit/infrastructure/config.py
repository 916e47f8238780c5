"""Configuration for labelkit.

Values come from the environment; a ``.env`` file in the working
directory is loaded first so deployments can keep printer settings
next to the catalog.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.value_objects import DEFAULT_CURRENCY
from labelkit.domain.service.print_orchestrator import (
    ASSET_TIMEOUT,
    FALLBACK_TIMEOUT,
    SETTLE_DELAY,
)


@dataclass(frozen=True)
class Settings:

    data_dir: Path = Path("data")
    output_dir: Path = Path("labels")
    # Label file path is appended as the last argument, e.g. ["lp", "-d", "zebra"].
    # Empty means preview only: labels are written but never sent to a printer.
    print_command: tuple[str, ...] = ()
    currency: str = DEFAULT_CURRENCY
    settle_delay: float = SETTLE_DELAY
    fallback_timeout: float = FALLBACK_TIMEOUT
    asset_timeout: float | None = ASSET_TIMEOUT
    log_level: str = "INFO"
    log_dir: Path | None = None

    @staticmethod
    def from_env(env_file: str | os.PathLike | None = None) -> Settings:
        load_dotenv(env_file)
        env = os.environ

        asset_timeout = env.get("LABELKIT_ASSET_TIMEOUT", str(ASSET_TIMEOUT))
        log_dir = env.get("LABELKIT_LOG_DIR", "")

        return Settings(
            data_dir=Path(env.get("LABELKIT_DATA_DIR", "data")),
            output_dir=Path(env.get("LABELKIT_OUTPUT_DIR", "labels")),
            print_command=tuple(shlex.split(env.get("LABELKIT_PRINT_COMMAND", ""))),
            currency=env.get("LABELKIT_CURRENCY", DEFAULT_CURRENCY),
            settle_delay=_seconds(env, "LABELKIT_SETTLE_DELAY", SETTLE_DELAY),
            fallback_timeout=_seconds(env, "LABELKIT_FALLBACK_TIMEOUT", FALLBACK_TIMEOUT),
            asset_timeout=(
                _seconds(env, "LABELKIT_ASSET_TIMEOUT", ASSET_TIMEOUT)
                if asset_timeout.strip()
                else None
            ),
            log_level=env.get("LABELKIT_LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir.strip() else None,
        )


def _seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, str(default))
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be a number of seconds, got {raw!r}") from exc
    if value < 0:
        raise ValidationError(f"{name} cannot be negative, got {raw!r}")
    return value
