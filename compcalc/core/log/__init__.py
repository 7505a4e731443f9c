"""Logging for the calculator: rich console output plus optional daily files.

The API and the console report both call :func:`configure_logging` with the
loaded :class:`~compcalc.core.config.Settings`; modules only ever ask for a
logger through :func:`get_logger`.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler

from .context import ContextFilter, log_context
from .timing import timeit

if TYPE_CHECKING:
    from compcalc.core.config import Settings

__all__ = [
    "configure_logging",
    "get_logger",
    "init_logging",
    "log_context",
    "shutdown_logging",
    "timeit",
]

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """Options the logging subsystem was last initialised with."""

    app_name: str = "compcalc"
    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True


_lock = RLock()
_config: LoggingConfig | None = None
_handlers: list[logging.Handler] = []
_context_filter = ContextFilter()


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


class DailyFileHandler(logging.FileHandler):
    """Append records to ``<log_dir>/YYYY_MM_DD.log``, rolling over at midnight."""

    def __init__(self, directory: Path, *, encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._current_date: date = datetime.now().date()
        super().__init__(self.path_for(self._current_date), mode="a", encoding=encoding)

    def path_for(self, day: date) -> Path:
        return self.directory / f"{day.strftime('%Y_%m_%d')}.log"

    def emit(self, record: logging.LogRecord) -> None:
        record_date = datetime.fromtimestamp(record.created).date()
        if record_date != self._current_date:
            self._current_date = record_date
            self.close()
            self.baseFilename = os.fspath(self.path_for(record_date))
        super().emit(record)


def _build_handlers(cfg: LoggingConfig) -> list[logging.Handler]:
    level = _parse_level(cfg.level)
    handlers: list[logging.Handler] = []

    if cfg.console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
        handlers.append(console_handler)

    if cfg.log_dir:
        file_handler = DailyFileHandler(Path(cfg.log_dir))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_context_filter)
    return handlers


def _teardown_locked() -> None:
    global _config
    root = logging.getLogger()
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()
    _config = None


def init_logging(**kwargs: object) -> LoggingConfig:
    """Attach the calculator's handlers to the root logger.

    Repeated calls with the same options are no-ops; different options
    replace the previously installed handlers.
    """

    global _config
    cfg = LoggingConfig(**kwargs)  # type: ignore[arg-type]
    with _lock:
        if _config == cfg:
            return cfg
        _teardown_locked()
        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        _handlers.extend(_build_handlers(cfg))
        for handler in _handlers:
            root.addHandler(handler)
        _config = cfg
    return cfg


def configure_logging(settings: "Settings") -> LoggingConfig:
    """Initialise logging from ``LOG_LEVEL`` and ``LOG_DIR``."""

    return init_logging(level=settings.log_level, log_dir=settings.log_dir)


def shutdown_logging() -> None:
    """Detach and close the installed handlers."""

    with _lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    with _lock:
        if _config is None:
            init_logging()
    return logging.getLogger(name or LoggingConfig.app_name)
