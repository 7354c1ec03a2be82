"""
Date-partitioned file naming for the standard and error logs.

Files are named <YYYY-MM-DD>-<base name>.csv inside the log directory,
using the UTC calendar date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"   # RFC 3339, UTC
FILE_SUFFIX = ".csv"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def today_utc(clock: Clock = utc_now) -> str:
    return clock().astimezone(timezone.utc).strftime(DATE_FORMAT)


def now_rfc3339(clock: Clock = utc_now) -> str:
    return clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def dated_filename(date: str, base_name: str) -> str:
    return f"{date}-{base_name}{FILE_SUFFIX}"


@dataclass(frozen=True)
class LogPaths:
    """Resolved absolute paths of the two destination files."""

    log_path: Path
    error_path: Path

    @property
    def shared(self) -> bool:
        # Both tiers interleave into one physical file
        return self.log_path == self.error_path

    @classmethod
    def resolve(
        cls,
        directory: str | Path,
        log_filename: str,
        error_filename: str,
        date: str,
    ) -> "LogPaths":
        root = Path(directory).absolute()
        return cls(
            log_path=root / dated_filename(date, log_filename),
            error_path=root / dated_filename(date, error_filename),
        )
