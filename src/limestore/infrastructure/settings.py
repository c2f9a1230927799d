"""Runtime settings, read from ``LIMESTORE_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from limestore.domain.model.store import DEFAULT_RETURN_WINDOW, PaymentPolicy

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    return_window: int = DEFAULT_RETURN_WINDOW
    payment_policy: PaymentPolicy = PaymentPolicy.PERMISSIVE
    log_level: int = logging.WARNING

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment; unset variables keep defaults.

        Raises ValueError on a malformed value.
        """
        env = os.environ if environ is None else environ

        data_dir = Path(env.get("LIMESTORE_DATA_DIR", str(DEFAULT_DATA_DIR)))

        raw_window = env.get("LIMESTORE_RETURN_WINDOW", str(DEFAULT_RETURN_WINDOW))
        try:
            return_window = int(raw_window)
        except ValueError:
            raise ValueError(
                f"LIMESTORE_RETURN_WINDOW must be an integer, got {raw_window!r}"
            ) from None
        if return_window <= 0:
            raise ValueError("LIMESTORE_RETURN_WINDOW must be positive")

        raw_policy = env.get("LIMESTORE_PAYMENT_POLICY", PaymentPolicy.PERMISSIVE.value)
        try:
            payment_policy = PaymentPolicy(raw_policy.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in PaymentPolicy)
            raise ValueError(
                f"LIMESTORE_PAYMENT_POLICY must be one of {choices}, got {raw_policy!r}"
            ) from None

        raw_level = env.get("LIMESTORE_LOG_LEVEL", "WARNING").strip().upper()
        log_level = logging.getLevelName(raw_level)
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown LIMESTORE_LOG_LEVEL {raw_level!r}")

        return Settings(
            data_dir=data_dir,
            return_window=return_window,
            payment_policy=payment_policy,
            log_level=log_level,
        )
