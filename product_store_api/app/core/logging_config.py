"""
Logging setup for the Product Store API.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where those records go.  The store logs each created
product at INFO and the error handler logs each rejected request at
WARNING, so ``LOG_LEVEL=WARNING`` keeps just the rejections.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send application logs to stderr and, if given, to ``logfile``.

    Does nothing when the root logger already has handlers, e.g. when
    uvicorn or a test runner configured it first, or when
    ``create_app`` runs more than once in a process.

    Parameters
    ----------
    level : str
        Value of ``LOG_LEVEL``.  Unrecognised names mean ``INFO``.
    logfile : Optional[str]
        Value of ``LOG_FILE``; empty or ``None`` disables the file.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
