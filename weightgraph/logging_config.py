"""Opt-in logging setup for applications using weightgraph.

The library itself only creates module loggers; nothing is emitted unless the
host application configures logging, either directly or through
configure_logging().
"""

import logging
import os
from pathlib import Path
from typing import Optional

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure the weightgraph logger from WEIGHTGRAPH_LOG_LEVEL and WEIGHTGRAPH_LOG_FILE."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = _read_level(os.getenv("WEIGHTGRAPH_LOG_LEVEL", "0"))
    log_path = os.getenv("WEIGHTGRAPH_LOG_FILE")

    if level is None or level <= 0:
        # Silent mode
        _CONFIGURED = True
        return

    if log_path:
        log_file = Path(log_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="a")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("weightgraph")
    logger.setLevel(_map_level(level))
    logger.addHandler(handler)
    _CONFIGURED = True


def _read_level(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def _map_level(level: int) -> int:
    if level >= 2:
        return logging.DEBUG
    return logging.INFO
