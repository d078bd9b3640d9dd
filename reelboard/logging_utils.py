"""Logging setup shared by the API and the CLI.

``reelboard import export.csv | head`` closes stdout while the import is
still logging; the handler here drops those records rather than crashing.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Libraries that log every HTTP round trip at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "openai")


class SafeStreamHandler(logging.StreamHandler):
    """Stream handler that tolerates a vanished stdout/stderr."""

    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, ValueError):
            # Reader went away, or the stream was already closed
            pass


def quiet_noisy_loggers(level=logging.WARNING):
    """Raise the level of chatty third-party loggers."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)


def configure_safe_logging(level=logging.INFO):
    """Attach one SafeStreamHandler (stderr) to the root logger.

    Repeated calls reuse the existing handler. The root level is only ever
    lowered to ``level``, never raised.
    """
    root = logging.getLogger()
    if not any(isinstance(h, SafeStreamHandler) for h in root.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(level)
        root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
    quiet_noisy_loggers()
