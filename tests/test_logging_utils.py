"""Tests for logging utilities."""
import io
import logging
from unittest.mock import patch

import pytest

from reelboard.logging_utils import (
    NOISY_LOGGERS,
    SafeStreamHandler,
    configure_safe_logging,
    quiet_noisy_loggers,
)


def make_record(msg="test message"):
    return logging.LogRecord(
        name="reelboard.test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestSafeStreamHandler:
    """Tests for SafeStreamHandler exception handling."""

    @pytest.mark.parametrize("error", [
        BrokenPipeError("stdout closed"),
        ValueError("I/O operation on closed file"),
    ])
    def test_swallows_pipe_and_closed_file_errors(self, error):
        handler = SafeStreamHandler(stream=io.StringIO())

        with patch.object(logging.StreamHandler, "emit", side_effect=error):
            handler.emit(make_record())  # Should not raise

    def test_reraises_other_exceptions(self):
        handler = SafeStreamHandler(stream=io.StringIO())

        with patch.object(logging.StreamHandler, "emit", side_effect=RuntimeError("unexpected")):
            with pytest.raises(RuntimeError, match="unexpected"):
                handler.emit(make_record())

    def test_normal_logging_works(self):
        stream = io.StringIO()
        handler = SafeStreamHandler(stream=stream)
        handler.setFormatter(logging.Formatter("%(message)s"))

        handler.emit(make_record("imported 3 rows"))

        assert "imported 3 rows" in stream.getvalue()


class TestConfigureSafeLogging:
    """Tests for configure_safe_logging()."""

    def setup_method(self):
        root = logging.getLogger()
        self._saved_handlers = root.handlers[:]
        self._saved_level = root.level
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        root.setLevel(logging.WARNING)

    def teardown_method(self):
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in self._saved_handlers:
            root.addHandler(handler)
        root.setLevel(self._saved_level)

    def test_adds_handler_once(self):
        configure_safe_logging()
        configure_safe_logging()

        root = logging.getLogger()
        assert len([h for h in root.handlers if isinstance(h, SafeStreamHandler)]) == 1

    def test_lowers_root_level(self):
        configure_safe_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_keeps_more_permissive_level(self):
        logging.getLogger().setLevel(logging.DEBUG)

        configure_safe_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_quiets_http_libraries(self):
        logging.getLogger("httpx").setLevel(logging.DEBUG)

        configure_safe_logging()

        assert logging.getLogger("httpx").level == logging.WARNING


def test_quiet_noisy_loggers_custom_level():
    quiet_noisy_loggers(logging.ERROR)
    try:
        assert all(logging.getLogger(name).level == logging.ERROR for name in NOISY_LOGGERS)
    finally:
        quiet_noisy_loggers()
