"""A small process-wide logger writing formatted lines to stderr or a file."""

from __future__ import annotations

import enum
import inspect
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import TextIO

from dominion.exceptions import LoggerError

__all__ = [
    "LogLevel",
    "Logger",
    "parse_log_level",
    "level_name",
    "format_level",
    "format_log_level",
    "strip_file_path",
    "format_file_line",
    "format_timestamp",
    "initialize",
    "get_logger",
    "set_level",
    "get_level",
    "write_to",
]

RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
RESET = "\033[0m"

_PATH_MARKER = "dominion/"


class LogLevel(enum.IntEnum):
    """Severity of a log line; a logger drops lines below its minimum level."""

    INFO = 0
    DEBUG = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        return level_name(self)


_LEVEL_NAMES = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "error": LogLevel.ERROR,
}

_CONSOLE_COLOURS = {
    LogLevel.WARN: "\033[0;33m",
    LogLevel.ERROR: "\033[0;31m",
    LogLevel.DEBUG: "\033[0;34m",
    LogLevel.INFO: "\033[0;37m",
}


def parse_log_level(level: str) -> LogLevel | None:
    """Return the level named by a lower-case string, or None if unknown."""
    return _LEVEL_NAMES.get(level)


def level_name(level: LogLevel) -> str:
    """Return the upper-case name of a level."""
    return LogLevel(level).name


def format_level(level: LogLevel, log_to_file: bool) -> str:
    """Return the level name, coloured for the console unless writing to a file."""
    name = level_name(level)
    if log_to_file:
        return name
    return f"{_CONSOLE_COLOURS[LogLevel(level)]}{name}{RESET}"


def format_log_level(level: LogLevel, log_to_file: bool) -> str:
    """Return the bracketed, left-aligned level column of a log line."""
    width = 5 if log_to_file else 16
    return f"[{format_level(level, log_to_file):<{width}}]"


def strip_file_path(file: str) -> str:
    """Return the path relative to the project directory, if it can be found."""
    pos = file.find(_PATH_MARKER)
    if pos == -1:
        return file
    return file[pos + len(_PATH_MARKER):]


def format_file_line(file: str, line: int) -> str:
    return f"[{strip_file_path(file)}:{line}]"


def format_timestamp() -> str:
    """Return the current local time with millisecond precision, bracketed."""
    now = datetime.now()
    return f"[{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}]"


class Logger:
    """Writes log lines at or above a minimum level to stderr or a file."""

    def __init__(self, min_level: LogLevel = LogLevel.WARN) -> None:
        self.min_level = LogLevel(min_level)
        self._lock = threading.Lock()
        self._file: TextIO | None = None
        self.log_to_file = False

    def write_to(self, file_path: str = "") -> None:
        """Send output to the given file (appending), or back to stderr if empty."""
        if self._file is not None:
            self._file.close()
            self._file = None

        if not file_path:
            self.log_to_file = False
            self.log(LogLevel.INFO, "Logging to std::cerr.")
            return

        path = Path(file_path)
        self.log(LogLevel.INFO, f"Logging to file: {file_path}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = path.open("a", encoding="utf-8")
        except OSError as exc:
            raise LoggerError(f"Failed to open log file: {file_path}") from exc
        self.log_to_file = True

    def write(self, level: LogLevel, message: str) -> None:
        """Write a finished line unless its level is below the minimum."""
        if level < self.min_level:
            return
        with self._lock:
            if self.log_to_file and self._file is not None:
                self._file.write(message + "\n")
                self._file.flush()
            else:
                sys.stderr.write(message + "\n")
                sys.stderr.flush()

    def log(self, level: LogLevel, message: str, file: str | None = None, line: int | None = None) -> None:
        """Format a message with timestamp, level and source location and write it.

        Without a file and line, the caller's location is used.
        """
        if file is None or line is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            if caller is not None:
                file = caller.f_code.co_filename if file is None else file
                line = caller.f_lineno if line is None else line
            file = file if file is not None else "<unknown>"
            line = line if line is not None else 0
        text = (
            f"{format_timestamp()} "
            f"{format_log_level(level, self.log_to_file)} "
            f"{format_file_line(file, line)} - {message}"
        )
        self.write(level, text)

    def close(self) -> None:
        """Finish the log file, if any, with an end marker and close it."""
        if self._file is None:
            return
        with self._lock:
            if self.log_to_file:
                self._file.write("[INFO] - END LOG\n")
            self._file.close()
            self._file = None
            self.log_to_file = False

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_init_lock = threading.RLock()
_instance: Logger | None = None


def initialize() -> Logger:
    """Create the process-wide logger; raises LoggerError if it already exists."""
    global _instance
    with _init_lock:
        if _instance is not None:
            raise LoggerError("Logger has already been initialized.")
        _instance = Logger()
        _instance.log(LogLevel.INFO, "Logger initialized with default settings.")
        return _instance


def get_logger() -> Logger:
    """Return the process-wide logger, creating it with defaults if needed."""
    with _init_lock:
        if _instance is None:
            logger = initialize()
            logger.log(LogLevel.WARN, "Logger not initialized; using default settings.")
            return logger
        return _instance


def set_level(level: LogLevel) -> None:
    with _init_lock:
        get_logger().min_level = LogLevel(level)


def get_level() -> LogLevel:
    with _init_lock:
        return get_logger().min_level


def write_to(file_path: str = "") -> None:
    with _init_lock:
        get_logger().write_to(file_path)