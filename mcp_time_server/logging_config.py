"""Root logger setup shared by the stdio and HTTP servers."""

import logging
import sys
from pathlib import Path

from .config import ServerSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(settings: ServerSettings) -> logging.Logger:
    """Configure the root logger. Console output goes to stderr; stdout carries the stdio transport."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    # Remove any existing handlers (in case something already configured it)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return logging.getLogger("mcp_time_server")
