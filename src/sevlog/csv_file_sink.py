import os
import threading
from pathlib import Path

from src.sevlog.logger_config import FILE_MODE
from src.sevlog.logger_exceptions import LogWriteError


def _create_with_mode(path: str, flags: int) -> int:
    return os.open(path, flags | os.O_CREAT, FILE_MODE)


class CsvFileSink:
    """
    Append-only destination for formatted CSV lines.

    The file is opened once in append mode and kept open until close().
    A per-sink lock serializes writers so each line lands whole, and
    every write is flushed before emit() returns.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._closed = False

        # Creates the file if absent, never truncates existing content
        self._file = open(self._path, "a", encoding="utf-8", opener=_create_with_mode)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, line: str) -> None:
        """
        Append one line plus newline and flush it to the file.

        Raises LogWriteError if the sink is closed or the write fails.
        """
        with self._lock:
            if self._closed:
                raise LogWriteError("Log file is closed", path=self._path)
            try:
                self._file.write(line + "\n")
                self._file.flush()
            except (OSError, ValueError) as e:
                raise LogWriteError("Failed to append log line", path=self._path, details=str(e)) from e

    def close(self) -> None:
        """
        Close the underlying file handle. Later calls are no-ops.

        Close errors propagate so the owner can report them.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._file.close()
