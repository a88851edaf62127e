"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers below the ``kdvbundle`` namespace.
    - Allow an optional verbose mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; calling :func:`configure_logging` twice
      does not install a second handler.
    - Library use stays silent: the package root only carries a
      ``NullHandler`` until the CLI configures output.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "kdvbundle"
_HANDLER_NAME = "kdvbundle-stderr"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.  A handler left by a
    previous call is dropped without flushing, since the stream it was bound
    to may already be closed; the new handler writes to the current
    ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)
    for stale in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    return root
