"""
Logging configuration for convinci.

Configured from arguments or environment variables:
- CONVINCI_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- CONVINCI_LOG_FILE: write logs to this file instead of stderr
"""

import logging
import logging.handlers
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
HELD_RECORDS_LIMIT = 10000


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name. Defaults to CONVINCI_LOG_LEVEL or WARNING.
        log_file: Log file path. Defaults to CONVINCI_LOG_FILE; stderr if unset.
            The interactive screen owns stdout, so logs never go there.
    """
    log_level = (level or os.getenv("CONVINCI_LOG_LEVEL", "WARNING")).upper()
    log_file = log_file or os.getenv("CONVINCI_LOG_FILE")

    if log_level not in VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid CONVINCI_LOG_LEVEL '{log_level}', defaulting to WARNING\n")
        log_level = "WARNING"

    numeric_level = getattr(logging, log_level)

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt="%(levelname)s - %(message)s")

    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    root_logger.debug("Logging configured: level=%s, file=%s", log_level, log_file or "stderr")


@contextmanager
def hold_stderr_logs() -> Iterator[None]:
    """
    Buffer records bound for the terminal while the full-screen session runs.

    Stream handlers on the root logger are swapped for MemoryHandlers and the
    held records are written out, in order, once the block exits. File
    handlers keep logging as usual.
    """
    root_logger = logging.getLogger()
    held = []
    for handler in root_logger.handlers[:]:
        if type(handler) is logging.StreamHandler:
            buffer = logging.handlers.MemoryHandler(
                HELD_RECORDS_LIMIT, flushLevel=logging.CRITICAL + 1, target=handler
            )
            root_logger.removeHandler(handler)
            root_logger.addHandler(buffer)
            held.append((handler, buffer))
    try:
        yield
    finally:
        for handler, buffer in held:
            root_logger.removeHandler(buffer)
            root_logger.addHandler(handler)
            buffer.close()
