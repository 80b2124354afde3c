"""Console and file logging with a label prefix per line."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class LogType(Enum):
    """Severity of a log line."""

    VERBOSE = 0
    DEBUGGING = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    def label(self) -> str:
        """Return the text shown in front of the line."""
        return self.name


@dataclass
class _Config:
    enabled: bool = False
    log_verbose: bool = False
    file_path: str = "log.txt"


_config = _Config()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: str = "log.txt") -> None:
    """Set the global logging configuration and clear the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = file_path
    Path(file_path).write_text("")


def _can_log(log_type: LogType) -> bool:
    return _config.enabled and (log_type is not LogType.VERBOSE or _config.log_verbose)


def log(log_type: LogType = LogType.DEBUGGING, *args: Any) -> None:
    """Write one labelled line made of ``args`` to stdout and the log file."""
    if not _can_log(log_type):
        return
    line = f"[{log_type.label()}] " + "".join(str(arg) for arg in args)
    sys.stdout.write(line + "\n")
    sys.stdout.flush()
    with open(_config.file_path, "a", encoding="utf-8") as fh:
        fh.write(line + "\n")