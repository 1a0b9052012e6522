import logging
import uuid
from pathlib import Path

import pytest

from flapper.utilities.logging import get_logger


def _unique_name() -> str:
    return f"flapper.tests.{uuid.uuid4().hex}"


class TestGetLogger:
    """Loggers write to the stream and to a rotating file under the log directory."""

    def test_writes_rotating_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A log file named after the logger appears in the configured directory."""
        monkeypatch.setenv("FLAPPER_LOG_DIR", str(tmp_path))
        name = _unique_name()

        logger = get_logger(name)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / f"{name.replace('.', '_')}.log"
        assert log_file.exists()
        assert "hello" in log_file.read_text()
        assert logger.propagate is False

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        """Asking twice for the same logger keeps a single set of handlers."""
        name = _unique_name()

        first = get_logger(name)
        second = get_logger(name)

        assert first is second
        assert len(second.handlers) == 2

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL controls the logger level."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        logger = get_logger(_unique_name())

        assert logger.level == logging.DEBUG
