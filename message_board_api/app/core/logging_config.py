"""
Logging setup for the Message Board API.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is configured, a file handler writing the same
records.  It runs from ``create_app``; a process whose root logger
already has handlers (pytest, uvicorn with ``--log-config``) keeps
its own configuration.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger for the API process.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        File receiving a copy of every record.  Missing parent
        directories are created.

    Returns
    -------
    bool
        ``False`` if the root logger was already configured and left
        untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
