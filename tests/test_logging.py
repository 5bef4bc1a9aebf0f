import io
import logging
import sys
from typing import Any

from sentence_focus.utils.logging import PACKAGE_LOGGER, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("sentence_focus.session").name == "sentence_focus.session"
    assert get_logger("host").name == "sentence_focus.host"


def test_configure_logging_idempotent() -> None:
    configure_logging(verbose=True)
    logger = configure_logging(verbose=False)
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.WARNING
    named = [h for h in logger.handlers if h.get_name() == "sentence_focus.stderr"]
    assert len(named) == 1


def test_configure_logging_follows_current_stderr(monkeypatch: Any) -> None:
    buf = io.StringIO()
    monkeypatch.setattr(sys, "stderr", buf)
    try:
        logger = configure_logging(verbose=False)
        get_logger("host").warning("ping")
        (handler,) = [h for h in logger.handlers if h.get_name() == "sentence_focus.stderr"]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is buf
        assert "WARNING sentence_focus.host: ping" in buf.getvalue()
        other = io.StringIO()
        assert handler.setStream(other) is buf
        assert handler.stream is other
    finally:
        monkeypatch.undo()
        configure_logging(verbose=False)
