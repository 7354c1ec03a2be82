import pytest

from src.sevlog.process_kind import ProcessKind, process_kind_display_string
from src.sevlog.severity import Severity, is_error_tier, severity_display_string


def test_severity_display_strings() -> None:
    expected = {
        Severity.EMERGENCY: "EMERGENCY",
        Severity.ALERT: "ALERT",
        Severity.CRITICAL: "CRITICAL",
        Severity.NOTICE: "NOTICE",
        Severity.DEBUG: "DEBUG",
        Severity.TRACE: "TRACE",
    }
    assert set(expected) == set(Severity)
    for severity, text in expected.items():
        assert severity_display_string(severity) == text


def test_process_kind_display_strings() -> None:
    assert process_kind_display_string(ProcessKind.OPERATING_SYSTEM) == "Operating System"
    assert process_kind_display_string(ProcessKind.GOROUTINE) == "Goroutine"
    assert process_kind_display_string(ProcessKind.REQUEST) == "Request"
    assert all(process_kind_display_string(kind) for kind in ProcessKind)


def test_severity_ranks_are_ordered() -> None:
    ranks = [s.rank for s in Severity]
    assert ranks == [0, 1, 2, 3, 4, 5]
    assert Severity.EMERGENCY.rank < Severity.TRACE.rank


def test_error_tier_partition() -> None:
    error_tier = {s for s in Severity if is_error_tier(s)}
    assert error_tier == {Severity.EMERGENCY, Severity.ALERT, Severity.CRITICAL}


def test_unknown_values_fail_fast() -> None:
    with pytest.raises(ValueError):
        severity_display_string(3)
    with pytest.raises(ValueError):
        process_kind_display_string("Request")
    with pytest.raises(ValueError):
        is_error_tier("CRITICAL")
