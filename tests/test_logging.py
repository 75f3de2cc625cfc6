from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fec_pipeline.logging_config import configure_logging

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "fec.log"
    configure_logging(log_path, "debug")
    logging.getLogger("fec_pipeline.test").debug("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert logging.getLogger().level == logging.DEBUG
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging(None, "chatty")
