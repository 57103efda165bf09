from __future__ import annotations

import logging

import pytest

from src.config import LoggingConfig
from src.logging_setup import configure_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_writes_log_file(tmp_path, restore_root_logger) -> None:
    log_path = configure_logging(LoggingConfig(level="debug", log_dir=str(tmp_path / "logs")))

    logging.getLogger("src.test").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path == tmp_path / "logs" / "viewer.log"
    assert logging.getLogger().level == logging.DEBUG
    assert "hello from test" in log_path.read_text(encoding="utf-8")


def test_configure_logging_rejects_unknown_level(tmp_path, restore_root_logger) -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="LOUD", log_dir=str(tmp_path)))
