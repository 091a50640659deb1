# faultcore/demos.py
"""
Demonstration scenarios

The three classic fault demonstrations, written as detectors that
classify the fault instead of crashing the interpreter:

- exhaust_memory: an unbounded allocation loop against a simulated heap
- check_file: a missing file (existence check only)
- walk_off_by_one: a loop that reads one element past the end

Each returns the HandlingOutcome of the fault, or None when no fault
occurred.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from .core.faults.models import RaisedFault
from .core.faults.registry import FaultRegistry, get_default_registry
from .core.policy.engine import Handlers, PolicyEngine
from .core.policy.outcome import HandlingOutcome


def exhaust_memory(
    budget_bytes: int = 64 * 1024 * 1024,
    chunk_bytes: int = 1024 * 1024,
    *,
    handlers: Handlers = None,
    registry: Optional[FaultRegistry] = None,
) -> HandlingOutcome:
    """
    Simulate an unbounded allocation loop against a heap of budget_bytes.

    The loop never stops on its own, so it always ends in OutOfMemory once
    the next chunk no longer fits. The number of chunks that fit is
    computed directly, so any budget returns in constant time.
    """
    if chunk_bytes <= 0:
        raise ValueError("chunk_bytes must be positive")

    registry = registry or get_default_registry()
    allocations = max(budget_bytes, 0) // chunk_bytes
    allocated = allocations * chunk_bytes
    fault = RaisedFault(
        kind=registry.lookup("OutOfMemory"),
        context=(
            f"heap exhausted after {allocations} allocations "
            f"({allocated} of {budget_bytes} bytes)"
        ),
    )
    return PolicyEngine(registry).classify(fault, handlers)


def check_file(
    path: Union[str, Path],
    *,
    handlers: Handlers = None,
    registry: Optional[FaultRegistry] = None,
) -> Optional[HandlingOutcome]:
    """Raise FileNotFound when path does not exist; None when it does"""
    path = Path(path)
    if path.exists():
        return None

    registry = registry or get_default_registry()
    fault = RaisedFault(
        kind=registry.lookup("FileNotFound"),
        context=f"opening {path}",
    )
    return PolicyEngine(registry).classify(fault, handlers)


def walk_off_by_one(
    items: Sequence,
    *,
    fixed: bool = False,
    handlers: Handlers = None,
    registry: Optional[FaultRegistry] = None,
) -> Optional[HandlingOutcome]:
    """
    Visit items with an inclusive upper bound (range(len + 1)).

    With fixed=True the loop uses the correct bound and never faults;
    fixing the caller is the remedy, not handling the fault.
    """
    stop = len(items) if fixed else len(items) + 1
    try:
        for i in range(stop):
            items[i]
    except IndexError as exc:
        registry = registry or get_default_registry()
        fault = RaisedFault.from_exception(
            exc,
            registry,
            context=f"index {i} of sequence with length {len(items)}",
        )
        return PolicyEngine(registry).classify(fault, handlers)
    return None


__all__ = [
    "exhaust_memory",
    "check_file",
    "walk_off_by_one",
]
