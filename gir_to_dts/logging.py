"""
Logger hierarchy of the compiler.

Every module logs through a child of the "gir_to_dts" logger. Only the
command line attaches a handler; as a library the package stays silent.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "gir_to_dts"
LOG_FORMAT = "[gir_to_dts] %(levelname)s %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Logger of a compiler component, e.g. "signature" or "class_graph"."""
    return logging.getLogger(f"{ROOT_LOGGER}.{component}" if component else ROOT_LOGGER)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """
    Send compiler messages to stderr.

    Progress lines are shown at INFO, skipped elements only with `verbose`.
    The console handler is replaced on every call, so repeated invocations
    in one process print each message once.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [console]
    return logger
