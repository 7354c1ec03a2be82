"""
Module: severity.py
Location: src/sevlog/
Version: 0.1.0

Severity levels for routed log lines.

Rank order is fixed and determines routing: ranks 0-2 form the
error tier, ranks 3-5 the standard tier.
"""

from enum import Enum


class Severity(Enum):
    """
    Semantic severity level of a log line, ordered by rank.
    """

    EMERGENCY = 0   # System unusable
    ALERT = 1       # Action must be taken immediately
    CRITICAL = 2    # Critical condition, operation failed
    NOTICE = 3      # Normal but significant condition
    DEBUG = 4       # Developer-focused diagnostic information
    TRACE = 5       # Extremely fine-grained execution detail

    @property
    def rank(self) -> int:
        return self.value


# Highest rank that still routes to the error file
ERROR_TIER_MAX_RANK = Severity.CRITICAL.rank


def severity_display_string(severity: Severity) -> str:
    if severity is Severity.EMERGENCY:
        return "EMERGENCY"
    if severity is Severity.ALERT:
        return "ALERT"
    if severity is Severity.CRITICAL:
        return "CRITICAL"
    if severity is Severity.NOTICE:
        return "NOTICE"
    if severity is Severity.DEBUG:
        return "DEBUG"
    if severity is Severity.TRACE:
        return "TRACE"
    raise ValueError(f"Unknown severity: {severity!r}")


def is_error_tier(severity: Severity) -> bool:
    """
    True when lines of this severity belong in the error file.
    """
    if not isinstance(severity, Severity):
        raise ValueError(f"Unknown severity: {severity!r}")
    return severity.rank <= ERROR_TIER_MAX_RANK
