"""Application log: coloured console lines plus an optional log file."""

from __future__ import annotations

import inspect
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import IO, Optional, Union
import os

LOG_FILE_NAME = "betterwallpaper.log"
MAX_LOG_BYTES = 5 * 1024 * 1024


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

_COLORS = {
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[35m",
}

_RESET = "\033[0m"


def level_name(level: LogLevel) -> str:
    """Short label used in log lines."""
    return _NAMES.get(level, "UNKNOWN")


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _caller(skip: int) -> tuple[str, int]:
    """File and line of the frame ``skip`` levels above the function calling this."""
    frame = inspect.currentframe()
    try:
        for _ in range(skip + 1):
            frame = frame.f_back if frame is not None else None
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


class Logger:
    """Thread-safe logger writing to a console stream and, once initialised, a file."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._file: Optional[IO[str]] = None
        self.log_file: Optional[Path] = None

    def init(self, log_dir: Union[str, os.PathLike]) -> None:
        """Open ``betterwallpaper.log`` in ``log_dir``, rotating it when over 5 MB."""
        with self._lock:
            directory = Path(log_dir)
            directory.mkdir(parents=True, exist_ok=True)
            self.log_file = directory / LOG_FILE_NAME
            if self.log_file.exists() and self.log_file.stat().st_size > MAX_LOG_BYTES:
                stamp = datetime.now().strftime("%Y%m%d%H%M%S")
                self.log_file.rename(f"{self.log_file}.{stamp}")
            if self._file is not None:
                self._file.close()
            self._file = open(self.log_file, "a", encoding="utf-8")

    def log(
        self,
        level: LogLevel,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        """Write one entry; ``file`` and ``line`` default to the caller's location."""
        if file is None:
            file, line = _caller(1)
        level = LogLevel(level)
        filename = Path(file).name
        with self._lock:
            timestamp = _timestamp()
            name = level_name(level)
            if self._file is not None:
                self._file.write(
                    f"[{timestamp}] [{name}] [{filename}:{line or 0}] {message}\n"
                )
                self._file.flush()
            stream = sys.stdout if self._stream is None else self._stream
            print(
                f"{_COLORS[level]}[{timestamp}] [{name}] {_RESET}{message}",
                file=stream,
                flush=True,
            )

    def close(self) -> None:
        """Close the log file; console output continues."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_DEFAULT = Logger()


def get_logger() -> Logger:
    """The process-wide logger."""
    return _DEFAULT


def _emit(level: LogLevel, message: str) -> None:
    file, line = _caller(2)
    _DEFAULT.log(level, message, file, line)


def debug(message: str) -> None:
    _emit(LogLevel.DEBUG, message)


def info(message: str) -> None:
    _emit(LogLevel.INFO, message)


def warning(message: str) -> None:
    _emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    _emit(LogLevel.ERROR, message)


def fatal(message: str) -> None:
    _emit(LogLevel.FATAL, message)