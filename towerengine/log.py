"""Minimal logging to the console and to a log file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class LogType(Enum):
    """Severity of a log line; the name is printed as its label."""

    VERBOSE = 0
    DEBUGGING = 1
    INFO = 2
    WARN = 3
    ERROR = 4


@dataclass
class _LogConfig:
    enabled: bool = False
    log_verbose: bool = False
    file_path: str = "log.txt"


_config = _LogConfig()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: str = "log.txt") -> None:
    """Set the global log configuration and empty the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = str(file_path)
    Path(_config.file_path).write_text("")


def _can_log(level: LogType) -> bool:
    return _config.enabled and (level is not LogType.VERBOSE or _config.log_verbose)


def log(level: LogType, *args: Any) -> None:
    """Write one line labelled with ``level`` to stdout and the log file.

    The arguments are converted to text and joined without separators.
    Nothing is written when logging is disabled, or for verbose lines unless
    verbose logging is enabled.
    """
    if not _can_log(level):
        return
    line = f"[{level.name}] " + "".join(str(arg) for arg in args)
    print(line, file=sys.stdout)
    with open(_config.file_path, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")