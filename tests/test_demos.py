# tests/test_demos.py
"""
The three classic demonstrations, classified instead of crashing
"""

import pytest

from faultcore import FaultState
from faultcore.demos import check_file, exhaust_memory, walk_off_by_one


def test_exhaust_memory_aborts(registry):
    outcome = exhaust_memory(budget_bytes=10, chunk_bytes=3, registry=registry)

    assert outcome.outcome == FaultState.ABORTED
    assert outcome.kind == "OutOfMemory"
    assert "heap exhausted after 3 allocations" in outcome.diagnostic


def test_exhaust_memory_ignores_handlers(registry):
    outcome = exhaust_memory(
        budget_bytes=10,
        chunk_bytes=3,
        handlers={"OutOfMemory": lambda fault: "more heap"},
        registry=registry,
    )

    assert outcome.is_abort


def test_exhaust_memory_rejects_empty_chunks(registry):
    with pytest.raises(ValueError):
        exhaust_memory(chunk_bytes=0, registry=registry)


def test_exhaust_memory_large_budget_returns_immediately(registry):
    outcome = exhaust_memory(budget_bytes=10**12, chunk_bytes=1, registry=registry)

    assert outcome.is_abort
    assert "heap exhausted after 1000000000000 allocations" in outcome.context


def test_exhaust_memory_budget_smaller_than_chunk(registry):
    outcome = exhaust_memory(budget_bytes=2, chunk_bytes=3, registry=registry)

    assert outcome.context == "heap exhausted after 0 allocations (0 of 2 bytes)"


def test_missing_file_without_handler(tmp_path, registry):
    outcome = check_file(tmp_path / "input.txt", registry=registry)

    assert outcome.is_abort
    assert "unhandled checked fault" in outcome.diagnostic
    assert "input.txt" in outcome.context


def test_missing_file_with_default(tmp_path, registry):
    outcome = check_file(
        tmp_path / "input.txt",
        handlers={"FileNotFound": lambda fault: ""},
        registry=registry,
    )

    assert outcome.outcome == FaultState.RECOVERED
    assert outcome.value == ""


def test_existing_file_no_fault(tmp_path, registry):
    path = tmp_path / "input.txt"
    path.write_text("hello")

    assert check_file(path, registry=registry) is None


def test_off_by_one_aborts(registry):
    outcome = walk_off_by_one([10, 20, 30], registry=registry)

    assert outcome.is_abort
    assert outcome.kind == "IndexOutOfRange"
    assert outcome.context == "index 3 of sequence with length 3"


def test_off_by_one_handled(registry):
    outcome = walk_off_by_one([10, 20, 30], handlers={"IndexOutOfRange": lambda f: 0}, registry=registry)

    assert outcome.is_recovered


def test_fixed_loop_never_faults(registry):
    assert walk_off_by_one([10, 20, 30], fixed=True, registry=registry) is None
    assert walk_off_by_one([], fixed=True, registry=registry) is None


def test_uses_default_registry():
    assert walk_off_by_one([]).kind == "IndexOutOfRange"
