"""Shared logging configuration for the consumer attack credits tooling.

The CLI calls ``configure_logging(**logging_settings(config))`` once, after
loading ``config/ingest.yaml``, whose ``logging`` section sets the level and
log file. Calling it again is a no-op while the root logger has handlers.
"""

import logging
import os
from typing import Any, Dict, Optional, Union

DEFAULT_LOG_FILE = "logs/credits.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_level(level: Union[int, str, None]) -> int:
    """Accept 10 / "DEBUG" / "debug"; anything unknown falls back to INFO."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        if isinstance(value, int):
            return value
    return logging.INFO


def logging_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """Pull ``level`` and ``log_file`` out of the ingest config's logging section."""
    section = config.get("logging") or {}
    return {
        "level": parse_level(section.get("level")),
        "log_file": section.get("file", DEFAULT_LOG_FILE),
    }


def configure_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = DEFAULT_LOG_FILE) -> None:
    """Attach a console handler and, when ``log_file`` is set and writable, a file handler."""
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fh = logging.FileHandler(log_file, mode="a")
            fh.setFormatter(formatter)
            root.addHandler(fh)
        except OSError:
            # Console logging is enough on a read-only checkout
            pass

    root.setLevel(parse_level(level))
