# -*- coding: utf-8 -*-
"""
Logging setup for the chat item linker.

Library modules only ever do logger = logging.getLogger(__name__) and never
configure handlers. Entry points (scripts, a host embedding the engine) call
setup_logging() once. Logs go to stderr by default so that annotated text on
stdout stays clean for piping.

Examples:
    from src.utils.logger import setup_logging
    setup_logging(level=logging.DEBUG, log_file="logs/annotate.log")

    import logging
    logger = logging.getLogger(__name__)
    logger.info("Vocabulary ready")
"""
# Standard library
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logging_configured = False


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional file that receives the same records; parent
                  directories are created
        format_string: Record format
        stream: Console stream (default: sys.stderr)
    """
    global _logging_configured

    if _logging_configured:
        return

    formatter = logging.Formatter(format_string)
    handlers = []

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Same as logging.getLogger(name)."""
    return logging.getLogger(name)
