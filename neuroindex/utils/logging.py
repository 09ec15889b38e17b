"""
neuroindex - Log Output

One console line per record: UTC timestamp, level, logger name, message.
Modules obtain loggers through get_logger; the host application (or
scripts/analyze_stats.py) calls setup_logging once at start-up.

Usage:
    from neuroindex.utils import get_logger, setup_logging

    setup_logging("DEBUG", "analysis.log")
    logger = get_logger(__name__)
"""
import logging
import sys
from typing import Optional
from datetime import datetime, timezone

# Marks handlers owned by setup_logging
_HANDLER_TAG = "_neuroindex"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class StructuredFormatter(logging.Formatter):
    """Console formatter; ANSI level colours only when ``use_color``."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.now(timezone.utc).isoformat()
        line = f"[{stamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"
        if self.use_color:
            line = f"{self.LEVEL_COLORS.get(record.levelname, '')}{line}{self.RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _tagged(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Install the console handler (and a file handler when ``log_file`` is set)
    on the root logger. Unknown level names fall back to INFO.

    Calling it again swaps out the handlers a previous call installed and
    leaves any other root handler alone.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    root.addHandler(_tagged(
        logging.StreamHandler(sys.stdout),
        StructuredFormatter(use_color=sys.stdout.isatty()),
    ))
    if log_file:
        root.addHandler(_tagged(logging.FileHandler(log_file), logging.Formatter(FILE_FORMAT)))


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)
