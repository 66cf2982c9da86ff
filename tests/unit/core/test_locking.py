from __future__ import annotations

"""
Unit tests for the Thread-Safe Logger Facade.

Verifies:
1. Delegation of configuration and emission to the wrapped Logger.
2. Whole-line integrity of file output under concurrent writers.
"""

from concurrent.futures import ThreadPoolExecutor

from plainlog.core.locking import LockedLogger
from plainlog.domain.levels import LogLevel


def test_delegates_to_inner_logger(make_logger, console) -> None:
    inner = make_logger()
    locked = LockedLogger(inner)

    locked.set_prefix("[L]")
    locked.set_levels(LogLevel.INFO, LogLevel.INFO)
    locked.debug("hidden")
    locked.warning("shown")
    locked.add_tag("t")

    assert locked.inner is inner
    assert console.getvalue() == "STAMP | WARNING [L] | shown\n"
    assert [t.name for t in locked.tags] == ["t"]


def test_concurrent_writers_produce_whole_lines(make_logger, tmp_path) -> None:
    log_file = tmp_path / "mt.log"
    inner = make_logger(
        console_level=LogLevel.ERROR,
        file_level=LogLevel.DEBUG,
        file_path=str(log_file),
        log_to_file=True,
        include_thread_id=True,
    )
    locked = LockedLogger(inner)
    workers, per_worker = 8, 50

    def _work(n: int) -> None:
        for i in range(per_worker):
            locked.info("worker {} line {}", n, i)
            if i % 10 == 0:
                locked.rotate_log(1024 * 1024)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(_work, range(workers)))

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == workers * per_worker
    assert all(line.startswith("STAMP | INFO  | Thread ID: ") for line in lines)
    assert all(" | worker " in line for line in lines)


def test_context_manager_closes_inner(make_logger, tmp_path) -> None:
    inner = make_logger(file_path=str(tmp_path / "c.log"), log_to_file=True)

    with LockedLogger(inner) as locked:
        locked.info("x")

    assert inner.closed
    assert inner.is_file_open is False


def test_exposes_inner_state(make_logger, tmp_path) -> None:
    log_file = tmp_path / "s.log"
    inner = make_logger(
        console_level=LogLevel.INFO,
        file_level=LogLevel.ERROR,
        file_path=str(log_file),
        log_to_file=True,
        include_process_id=True,
    )
    locked = LockedLogger(inner)
    locked.set_prefix("[P]")

    assert locked.console_level == LogLevel.INFO
    assert locked.file_level == LogLevel.ERROR
    assert locked.file_path == str(log_file)
    assert locked.date_format == "STAMP"
    assert locked.prefix == "[P]"
    assert locked.log_to_file is True
    assert locked.include_thread_id is False
    assert locked.include_process_id is True
    assert locked.colors == inner.colors
    assert locked.is_file_open is True
    assert locked.closed is False

    locked.close()
    assert locked.closed is True
    assert locked.is_file_open is False
