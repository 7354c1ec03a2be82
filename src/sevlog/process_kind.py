from enum import Enum


class ProcessKind(Enum):
    """
    Kind of execution unit that produced a log line.
    """

    OPERATING_SYSTEM = "operating_system"   # OS process (pid)
    GOROUTINE = "goroutine"                 # Lightweight concurrent task or thread
    REQUEST = "request"                     # Inbound request being served


def process_kind_display_string(kind: ProcessKind) -> str:
    if kind is ProcessKind.OPERATING_SYSTEM:
        return "Operating System"
    if kind is ProcessKind.GOROUTINE:
        return "Goroutine"
    if kind is ProcessKind.REQUEST:
        return "Request"
    raise ValueError(f"Unknown process kind: {kind!r}")
