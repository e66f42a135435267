from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: logging.Handler | None = None


def configure_logging(level: int = logging.INFO) -> None:
    global _console_handler

    root_logger = logging.getLogger()
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(_console_handler)
    root_logger.setLevel(level)
