import os
import stat
import threading
from pathlib import Path

import pytest

from src.sevlog.csv_file_sink import CsvFileSink
from src.sevlog.logger_exceptions import LogWriteError


def test_sink_creates_file_with_read_only_for_others(tmp_path: Path) -> None:
    old_umask = os.umask(0o022)
    try:
        sink = CsvFileSink(tmp_path / "out.csv")
    finally:
        os.umask(old_umask)
    sink.close()

    mode = stat.S_IMODE((tmp_path / "out.csv").stat().st_mode)
    assert mode == 0o644


def test_sink_appends_without_truncating(tmp_path: Path) -> None:
    path = tmp_path / "out.csv"
    path.write_text("existing line\n", encoding="utf-8")

    sink = CsvFileSink(path)
    sink.emit("new line")

    # Flushed before emit returns, visible without closing
    assert path.read_text(encoding="utf-8") == "existing line\nnew line\n"
    sink.close()


def test_emit_after_close_raises(tmp_path: Path) -> None:
    sink = CsvFileSink(tmp_path / "out.csv")
    sink.close()
    sink.close()
    assert sink.closed
    with pytest.raises(LogWriteError):
        sink.emit("late line")


def test_write_failure_surfaces_as_log_write_error(tmp_path: Path) -> None:
    class BrokenFile:
        def write(self, data):
            raise OSError("disk full")

        def flush(self):
            pass

        def close(self):
            pass

    sink = CsvFileSink(tmp_path / "out.csv")
    sink._file.close()
    sink._file = BrokenFile()

    with pytest.raises(LogWriteError) as excinfo:
        sink.emit("line")
    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.path == tmp_path / "out.csv"


def test_concurrent_emits_produce_whole_lines(tmp_path: Path) -> None:
    sink = CsvFileSink(tmp_path / "out.csv")
    workers = 50
    barrier = threading.Barrier(workers)
    payload = "x" * 5000

    def worker(i: int) -> None:
        barrier.wait()
        sink.emit(f"{i},{payload}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    sink.close()

    lines = (tmp_path / "out.csv").read_text(encoding="utf-8").splitlines()
    assert len(lines) == workers
    assert sorted(int(line.split(",")[0]) for line in lines) == list(range(workers))
    assert all(line.split(",")[1] == payload for line in lines)
