"""Logging setup tests."""

import logging
import sys
from pathlib import Path

import pytest
from loguru import logger

from src.user_service.api.utils.app_startup import configure_logging
from src.user_service.runtime.config.config_data import ConfigData, LoggingConfig


@pytest.fixture
def log_file(tmp_path: Path):
    """Configure logging with a file sink and restore the default sink afterwards."""
    path = tmp_path / "logs" / "app.log"
    configure_logging(ConfigData(logging=LoggingConfig(level="INFO", file=str(path))))
    yield path
    logger.remove()
    logger.add(sys.stderr)


def _read(path: Path) -> str:
    logger.complete()
    return path.read_text(encoding="utf-8")


class TestConfigureLogging:
    """Test the loguru setup."""

    def test_file_sink_created(self, log_file: Path):
        """Should write records to the configured log file."""
        logger.info("hello from the service")

        content = _read(log_file)
        assert "hello from the service" in content
        assert "[-]" in content

    def test_request_id_from_context(self, log_file: Path):
        """Should include the request ID bound to the context."""
        with logger.contextualize(request_id="req-42"):
            logger.info("inside a request")

        assert "[req-42]" in _read(log_file)

    def test_stdlib_logging_is_intercepted(self, log_file: Path):
        """Should forward standard library records to loguru."""
        logging.getLogger("strawberry.execution").warning("forwarded record")

        assert "forwarded record" in _read(log_file)

    def test_uvicorn_access_records_are_dropped(self, log_file: Path):
        """Should drop uvicorn access records."""
        logging.getLogger("uvicorn.access").critical("GET /users 200")

        assert "GET /users 200" not in _read(log_file)

    def test_level_filters_messages(self, log_file: Path):
        """Should drop records below the configured level."""
        logger.debug("too verbose")

        assert "too verbose" not in _read(log_file)
