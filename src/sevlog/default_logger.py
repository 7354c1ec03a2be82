"""
Process-wide default SeverityLogger.

Host programs that prefer module-level calls over passing a logger
instance around use initialize() once at startup, then log() anywhere.
Only the first initialize() call creates the logger; later calls,
concurrent or not, return the paths it resolved.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from src.sevlog.log_event import LogEvent
from src.sevlog.log_paths import LogPaths
from src.sevlog.logger_config import LoggerConfig
from src.sevlog.logger_exceptions import LoggerStateError
from src.sevlog.severity import Severity
from src.sevlog.severity_logger import SeverityLogger

_lock = threading.Lock()
_default: Optional[SeverityLogger] = None


def initialize(directory: str | Path, log_filename: str, error_filename: str = "") -> LogPaths:
    global _default

    with _lock:
        if _default is None:
            logger = SeverityLogger(
                LoggerConfig(
                    directory=Path(directory),
                    log_filename=log_filename,
                    error_filename=error_filename,
                )
            )
            logger.initialize()
            _default = logger
        return _default.paths


def get_logger() -> SeverityLogger:
    if _default is None:
        raise LoggerStateError("Default logger has not been initialized")
    return _default


def log(severity: Severity, event: LogEvent) -> None:
    get_logger().log(severity, event)


def shutdown() -> None:
    if _default is not None:
        _default.shutdown()
