"""
Module: logger_config.py
Location: src/sevlog/
Version: 0.1.0

Declarative configuration for a SeverityLogger.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from src.sevlog.logger_exceptions import LoggerConfigError

# Directory: owner rwx, group/other r-x
DIR_MODE = 0o755
# Files: owner rw, group/other r
FILE_MODE = 0o644

BOOTSTRAP_MESSAGE = "Logger initialised successfully"


def validate_base_name(field_name: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise LoggerConfigError(f"{field_name} must be a non-empty string.")
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in value for sep in separators):
        raise LoggerConfigError(f"{field_name} must not contain a path separator.")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Where the two CSV logs live and how their files are named.

    error_filename falls back to log_filename when empty, in which case
    both tiers share a single file.
    """

    directory: Path
    log_filename: str
    error_filename: Optional[str] = ""

    def __post_init__(self) -> None:
        if not str(self.directory):
            raise LoggerConfigError("directory must be a non-empty path.")
        object.__setattr__(self, "directory", Path(self.directory))
        validate_base_name("log_filename", self.log_filename)
        if self.error_filename:
            validate_base_name("error_filename", self.error_filename)

    @property
    def resolved_error_filename(self) -> str:
        return self.error_filename or self.log_filename

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggerConfig":
        """
        Build a config from a plain mapping, e.g. a section of a host
        program's settings.
        """
        required = ["directory", "log_filename"]
        missing = [k for k in required if k not in data]
        if missing:
            raise LoggerConfigError(f"Missing required fields: {missing}")

        return cls(
            directory=Path(str(data["directory"])),
            log_filename=str(data["log_filename"]),
            error_filename=str(data.get("error_filename") or ""),
        )
