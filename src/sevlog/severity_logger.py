"""
Module: severity_logger.py
Location: src/sevlog/
Version: 0.1.0

Severity-routed CSV logger.

A SeverityLogger owns two append-only CSV files in one directory:
the standard log (NOTICE, DEBUG, TRACE) and the error log
(EMERGENCY, ALERT, CRITICAL). The host program constructs one logger,
calls initialize() once at startup and passes the instance to every
call site.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional

from src.sevlog.csv_file_sink import CsvFileSink
from src.sevlog.log_event import LogEvent, format_line
from src.sevlog.log_paths import Clock, LogPaths, now_rfc3339, today_utc, utc_now
from src.sevlog.logger_config import BOOTSTRAP_MESSAGE, DIR_MODE, LoggerConfig
from src.sevlog.logger_exceptions import LoggerInitError, LoggerStateError, LogWriteError
from src.sevlog.process_kind import ProcessKind
from src.sevlog.severity import Severity, is_error_tier


class SeverityLogger:
    """
    Routes each log line to the standard or the error file by severity.

    initialize() runs its setup exactly once, however many threads call
    it. After that the sinks are read-only; each sink serializes its
    own writes, so the two files never block each other.
    """

    def __init__(self, config: LoggerConfig, *, clock: Clock = utc_now):
        self._config = config
        self._clock = clock
        self._init_lock = threading.Lock()
        self._paths: Optional[LogPaths] = None
        self._standard_sink: Optional[CsvFileSink] = None
        self._error_sink: Optional[CsvFileSink] = None
        self._shutdown = False

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def paths(self) -> LogPaths:
        if self._paths is None:
            raise LoggerStateError("Logger has not been initialized")
        return self._paths

    @property
    def initialized(self) -> bool:
        return self._paths is not None

    def initialize(self) -> LogPaths:
        """
        Resolve today's file paths, create the directory and both files,
        and write the bootstrap TRACE line.

        Later calls return the paths from the first call and do nothing
        else. Raises LoggerInitError if the directory or a file cannot be
        created.
        """
        if self._paths is not None:
            return self._paths

        with self._init_lock:
            if self._paths is not None:
                return self._paths
            if self._shutdown:
                raise LoggerStateError("Logger has been shut down")

            paths = LogPaths.resolve(
                self._config.directory,
                self._config.log_filename,
                self._config.resolved_error_filename,
                today_utc(self._clock),
            )
            standard_sink, error_sink = self._open_sinks(paths)
            self._standard_sink = standard_sink
            self._error_sink = error_sink

            try:
                self._write(
                    Severity.TRACE,
                    LogEvent(
                        process_kind=ProcessKind.OPERATING_SYSTEM,
                        process_id=str(os.getpid()),
                        message=BOOTSTRAP_MESSAGE,
                    ),
                )
            except LogWriteError as e:
                self._release_sinks()
                raise LoggerInitError("Failed to write bootstrap line", path=paths.log_path) from e

            self._paths = paths
            return paths

    def log(self, severity: Severity, event: LogEvent) -> None:
        """
        Append one line for the event to the file its severity routes to.

        Raises LogWriteError if the append fails, LoggerStateError if the
        logger was never initialized.
        """
        if self._paths is None:
            raise LoggerStateError("Logger has not been initialized")
        self._write(severity, event)

    def for_process(self, kind: ProcessKind, process_id: str) -> "ProcessLogger":
        return ProcessLogger(kind, str(process_id), self)

    def shutdown(self) -> None:
        """
        Close both files. Close errors are reported on stderr, not raised.
        """
        with self._init_lock:
            if self._shutdown:
                return
            self._shutdown = True
            self._release_sinks()

    # --------------------------------------------------
    # Internal helpers
    # --------------------------------------------------

    def _write(self, severity: Severity, event: LogEvent) -> None:
        line = format_line(severity, event, now_rfc3339(self._clock))
        sink = self._error_sink if is_error_tier(severity) else self._standard_sink
        sink.emit(line)

    def _open_sinks(self, paths: LogPaths) -> tuple[CsvFileSink, CsvFileSink]:
        directory = paths.log_path.parent
        try:
            directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise LoggerInitError("Failed to create log directory", path=directory, details=str(e)) from e

        try:
            standard_sink = CsvFileSink(paths.log_path)
        except OSError as e:
            raise LoggerInitError("Failed to create log file", path=paths.log_path, details=str(e)) from e

        if paths.shared:
            return standard_sink, standard_sink

        try:
            error_sink = CsvFileSink(paths.error_path)
        except OSError as e:
            standard_sink.close()
            raise LoggerInitError("Failed to create error log file", path=paths.error_path, details=str(e)) from e

        return standard_sink, error_sink

    def _release_sinks(self) -> None:
        sinks = [self._error_sink, self._standard_sink]
        if sinks[0] is sinks[1]:
            sinks = sinks[1:]
        for sink in sinks:
            if sink is None:
                continue
            try:
                sink.close()
            except OSError as e:
                print(f"[SeverityLogger] error while closing {sink.path}: {e}", file=sys.stderr)


class ProcessLogger:
    """
    Convenience façade bound to a single process descriptor.
    """

    def __init__(self, kind: ProcessKind, process_id: str, logger: SeverityLogger):
        self._kind = kind
        self._process_id = process_id
        self._logger = logger

    def log(self, severity: Severity, message: str) -> None:
        self._logger.log(
            severity,
            LogEvent(process_kind=self._kind, process_id=self._process_id, message=message),
        )

    def emergency(self, message: str) -> None:
        self.log(Severity.EMERGENCY, message)

    def alert(self, message: str) -> None:
        self.log(Severity.ALERT, message)

    def critical(self, message: str) -> None:
        self.log(Severity.CRITICAL, message)

    def notice(self, message: str) -> None:
        self.log(Severity.NOTICE, message)

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def trace(self, message: str) -> None:
        self.log(Severity.TRACE, message)
