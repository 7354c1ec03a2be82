from dataclasses import dataclass

from src.sevlog.process_kind import ProcessKind, process_kind_display_string
from src.sevlog.severity import Severity, severity_display_string


@dataclass(frozen=True)
class LogEvent:
    """
    Caller-constructed description of a single event to be logged.

    The severity is supplied separately at the log call, so the same
    event shape serves both the standard and the error file.
    """

    process_kind: ProcessKind
    # Kind of execution unit that produced the event.

    process_id: str
    # Free-form identifier of that unit (pid, task index, request id).
    # Written verbatim, never parsed.

    message: str
    # Human-readable event text.
    # Written verbatim: embedded commas or newlines are not escaped.


def format_line(severity: Severity, event: LogEvent, timestamp: str) -> str:
    """
    Render one CSV line (without trailing newline):
    SEVERITY,TIMESTAMP,PROCESS_KIND,PROCESS_ID,MESSAGE
    """
    return ",".join(
        (
            severity_display_string(severity),
            timestamp,
            process_kind_display_string(event.process_kind),
            event.process_id,
            event.message,
        )
    )
