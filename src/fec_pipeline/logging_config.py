"""Utilities to configure consistent logging across the pipeline."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure root logging handlers and formatting.

    Calling this more than once replaces the handlers installed earlier, so the
    CLI and tests can reconfigure freely.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level as a number or a name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
