import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from app.core.config import settings
from app.utils.logging import InterceptHandler, setup_logging

REWIRED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


@pytest.fixture
def log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    root_handlers, root_level = root.handlers[:], root.level
    saved = {
        name: (logging.getLogger(name).handlers[:], logging.getLogger(name).propagate)
        for name in REWIRED_LOGGERS
    }

    yield tmp_path / "logs"

    # Closing the sinks flushes the log file
    logger.remove()
    logger.add(sys.stderr)
    root.handlers, root.level = root_handlers, root_level
    for name, (handlers, propagate) in saved.items():
        logging.getLogger(name).handlers = handlers
        logging.getLogger(name).propagate = propagate


def test_setup_logging_dev_writes_debug(
    log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "env", "dev")
    monkeypatch.setattr(settings, "log_level", "WARNING")

    setup_logging("fights.log")
    logger.debug("fight 42 created")
    logger.remove()

    assert "fight 42 created" in (log_dir / "fights.log").read_text(encoding="utf-8")


def test_setup_logging_prod_uses_configured_level(
    log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "env", "prod")
    monkeypatch.setattr(settings, "log_level", "warning")

    setup_logging("fights.log")
    logger.info("fight 7 listed")
    logger.warning("fight service is slow")
    logger.remove()

    content = (log_dir / "fights.log").read_text(encoding="utf-8")
    assert "fight 7 listed" not in content
    assert "fight service is slow" in content


def test_setup_logging_rewires_server_loggers(
    log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "env", "prod")
    monkeypatch.setattr(settings, "log_level", "INFO")

    setup_logging("server.log")

    for name in REWIRED_LOGGERS:
        std_logger = logging.getLogger(name)
        assert std_logger.propagate is False
        assert [type(handler) for handler in std_logger.handlers] == [InterceptHandler]

    logging.getLogger("uvicorn.error").warning("Application startup failed")
    logger.remove()

    assert "Application startup failed" in (log_dir / "server.log").read_text(encoding="utf-8")
