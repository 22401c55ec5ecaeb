"""
Logging Configuration Module.

Every module obtains its logger through ``get_logger(__name__)``; the process
entry point calls ``setup_logging()`` once to attach handlers to the root logger.

Features:
- Console output filtered at the configured level
- Optional DEBUG file output under ``LOG_FILE_DIR``
- Simple, detailed and JSON-like line formats
- Per-package levels so upstream HTTP chatter stays quiet
"""

import logging
import os
from pathlib import Path
from typing import Optional

_TRUTHY = ("true", "1", "yes")


def _get_logging_config():
    """Resolve logging options from the settings model and the environment.

    Settings are imported lazily so that importing this module never triggers
    settings validation.
    """
    try:
        from weatherapi_mcp.server.core.config import settings

        log_level = settings.log_level
    except Exception:
        log_level = os.getenv("LOG_LEVEL", "INFO")
    return {
        "log_level": log_level.upper(),
        "log_format": os.getenv("LOG_FORMAT", "detailed").lower(),
        "log_file_dir": os.getenv("LOG_FILE_DIR", "logs"),
        "enable_file_logging": os.getenv("ENABLE_FILE_LOGGING", "false").lower() in _TRUTHY,
    }


_config = _get_logging_config()
LOG_LEVEL = _config["log_level"]
LOG_FORMAT = _config["log_format"]
LOG_FILE_DIR = _config["log_file_dir"]
ENABLE_FILE_LOGGING = _config["enable_file_logging"]

LOG_FILE_NAME = "weatherapi_mcp.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s %(name)s: %(message)s"

DETAILED_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s"

JSON_FORMAT = (
    '{"ts": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"location": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

MODULE_LOG_LEVELS = {
    "weatherapi_mcp.upstream": "DEBUG",
    "weatherapi_mcp.tools": "DEBUG",
    "weatherapi_mcp.jsonrpc": "DEBUG",
    "weatherapi_mcp.server": "INFO",
    "weatherapi_mcp.server.api": "DEBUG",
    # third-party
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def _console_handler(level: str, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(LOG_FILE_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Attach handlers to the root logger, replacing any installed earlier.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to LOG_LEVEL
        log_format: One of simple, detailed, json; unknown names fall back to detailed
        enable_file: Allow file output; it is written only when ENABLE_FILE_LOGGING is also set
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = (log_format or LOG_FORMAT).lower()
    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root = logging.getLogger()
    # Handlers filter by level; the root passes everything through
    root.setLevel(logging.DEBUG)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(_console_handler(level, formatter))
    file_logging = enable_file and ENABLE_FILE_LOGGING
    if file_logging:
        root.addHandler(_file_handler(formatter))

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name`` (pass ``__name__``)."""
    return logging.getLogger(name)
