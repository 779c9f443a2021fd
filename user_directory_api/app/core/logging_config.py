"""
Logging configuration for the service.

Everything the service prints goes through the root logger: the
request log lines from ``core.middleware``, the failures reported by
``core.errors`` and the server's own messages.  uvicorn normally
installs separate handlers with its own format; ``setup_logging``
removes those and lets uvicorn's loggers propagate, so a single
format covers the whole output::

    2026-10-19 12:00:00 [INFO] user_directory_api.app.core.middleware: Incoming Request: GET /users
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return the console handler plus a file handler if ``logfile`` is set."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def route_to_root(names: Iterable[str] = SERVER_LOGGERS) -> None:
    """Drop the handlers of the named loggers and let them propagate."""
    for name in names:
        server_logger = logging.getLogger(name)
        for handler in list(server_logger.handlers):
            server_logger.removeHandler(handler)
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once and route server logs through it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same lines as the console.
    """
    route_to_root()

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by the test runner or a previous
        # ``create_app`` call.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in build_handlers(logfile):
        root.addHandler(handler)
