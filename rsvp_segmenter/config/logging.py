"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys

from rsvp_segmenter.config.settings import get_settings

# Third-party loggers that are chatty at INFO (per-request access lines, multipart parsing)
NOISY_LOGGERS = ("uvicorn.access", "multipart", "python_multipart")


def configure_logging(level_name: str | None = None) -> None:
    """
    Configure stdout logging for the service. Level comes from level_name when given,
    else from Settings.log_level; unknown names fall back to INFO.
    Structured fields are passed at call sites via logger.<level>(msg, extra={...}).
    """
    name = level_name or get_settings().log_level
    level = getattr(logging, name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
