# src/task_board/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

LOG_FILE_NAME = "task-board.log"

# Chatty below WARNING: one INFO line per HTTP request.
DEFAULT_QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class BoardConsoleFilter(logging.Filter):
    """Console gets everything under `prefix`; other loggers only at `floor` and above."""

    def __init__(self, prefix: str = "task_board", floor: int = logging.ERROR) -> None:
        super().__init__()
        self.prefix = prefix
        self.floor = floor

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == self.prefix or name.startswith(self.prefix + "."):
            return True
        return record.levelno >= self.floor


def setup_logging(
    *,
    log_dir: str | Path = ".local/task-board",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    quiet_loggers: Iterable[str] = DEFAULT_QUIET_LOGGERS,
) -> Path:
    """
    Route task_board logs to stderr and everything to `<log_dir>/task-board.log`.

    Replaces handlers already on the root logger, so calling it twice does not
    duplicate output. Returns the log file path.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(BoardConsoleFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    return log_file
