"""Logging configuration for zabbix-rpc."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# httpx and its transport log connection details we want next to our own records.
_LOGGER_NAMES = ("zabbix_rpc", "httpx", "httpcore")


def setup_logging(log_path: Path, *, verbose: bool = False) -> None:
    """Route package and HTTP client loggers to one rotating log file.

    Package records are kept from DEBUG when verbose, from INFO otherwise.
    HTTP client records below WARNING are only kept when verbose.
    Idempotent: skips if the package logger already has a handler.
    """
    if logging.getLogger("zabbix_rpc").handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        if name == "zabbix_rpc":
            logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        else:
            logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        logger.addHandler(handler)
