# tests/policy/test_policy_engine.py
"""
Policy engine tests - lock down classification semantics

- FATAL always aborts, handlers are never consulted
- CHECKED without a handler aborts with "unhandled checked fault"
- UNCHECKED recovers through a handler, aborts without one
- A raising handler propagates
"""

import threading

import pytest

from faultcore.core.errors import UnknownKindError
from faultcore.core.faults import FaultCategory, FaultKind, FaultRegistry, RaisedFault
from faultcore.core.policy import (
    Disposition,
    FaultState,
    HandlerChain,
    PolicyEngine,
    classify,
    handling,
)


def make_registry():
    registry = FaultRegistry()
    registry.register_multiple([
        FaultKind("OutOfMemory", FaultCategory.FATAL),
        FaultKind("StackOverflow", FaultCategory.FATAL),
        FaultKind("FileNotFound", FaultCategory.CHECKED),
        FaultKind("Interrupted", FaultCategory.CHECKED),
        FaultKind("IndexOutOfRange", FaultCategory.UNCHECKED),
        FaultKind("NullReference", FaultCategory.UNCHECKED),
    ])
    registry.seal()
    return registry


REGISTRY = make_registry()
ENGINE = PolicyEngine(REGISTRY)


def raise_fault(name, context="test site"):
    return RaisedFault(REGISTRY.lookup(name), context=context)


class TestFatal:
    """Fatal faults always abort"""

    @pytest.mark.parametrize("name", ["OutOfMemory", "StackOverflow"])
    def test_always_aborts(self, name):
        outcome = ENGINE.classify(raise_fault(name))

        assert outcome.outcome == FaultState.ABORTED
        assert outcome.disposition == Disposition.ABORT
        assert outcome.is_abort and not outcome.is_recovered

    @pytest.mark.parametrize("name", ["OutOfMemory", "StackOverflow"])
    def test_never_recovered_even_with_handler(self, name):
        called = []

        outcome = ENGINE.classify(raise_fault(name), {name: lambda f: called.append(f) or "value"})

        assert outcome.is_abort
        assert outcome.value is None
        assert called == []

    def test_heap_exhausted_scenario(self):
        outcome = ENGINE.classify(raise_fault("OutOfMemory", context="heap exhausted"))

        assert outcome.is_abort
        assert "heap exhausted" in outcome.diagnostic
        assert "OutOfMemory" in outcome.diagnostic


class TestChecked:
    """Checked faults must be handled along the call path"""

    @pytest.mark.parametrize("name", ["FileNotFound", "Interrupted"])
    def test_no_handler_aborts(self, name):
        outcome = ENGINE.classify(raise_fault(name, context="reading settings.yml"))

        assert outcome.outcome == FaultState.ABORTED
        assert outcome.disposition == Disposition.MUST_HANDLE
        assert "unhandled checked fault" in outcome.diagnostic
        assert name in outcome.diagnostic
        assert "reading settings.yml" in outcome.diagnostic

    def test_handler_returning_default_recovers(self):
        outcome = ENGINE.classify(raise_fault("FileNotFound"), {"FileNotFound": lambda f: "default"})

        assert outcome.outcome == FaultState.RECOVERED
        assert outcome.disposition == Disposition.MUST_HANDLE
        assert outcome.value == "default"
        assert outcome.diagnostic is None

    def test_handler_for_other_kind_does_not_count(self):
        outcome = ENGINE.classify(raise_fault("FileNotFound"), {"Interrupted": lambda f: 0})

        assert outcome.is_abort

    def test_handler_receives_fault(self):
        seen = []
        fault = raise_fault("FileNotFound", context="config")

        ENGINE.classify(fault, {"FileNotFound": seen.append})

        assert seen == [fault]


class TestUnchecked:
    """Unchecked faults are handled when a handler exists"""

    @pytest.mark.parametrize("name", ["IndexOutOfRange", "NullReference"])
    def test_handler_recovers(self, name):
        outcome = ENGINE.classify(raise_fault(name), {name: lambda f: -1})

        assert outcome.outcome == FaultState.RECOVERED
        assert outcome.disposition == Disposition.OPTIONALLY_HANDLED
        assert outcome.value == -1

    def test_no_handler_aborts_with_context(self):
        outcome = ENGINE.classify(raise_fault("IndexOutOfRange", context="items[5] of 5"))

        assert outcome.is_abort
        assert outcome.disposition == Disposition.OPTIONALLY_HANDLED
        assert "items[5] of 5" in outcome.diagnostic
        assert "unhandled checked fault" not in outcome.diagnostic


class TestPropagation:
    """Handlers that raise propagate their exception"""

    def test_raising_handler_propagates(self):
        def handler(fault):
            raise RuntimeError("handler broke")

        outcome = ENGINE.classify(raise_fault("FileNotFound"), {"FileNotFound": handler})

        assert outcome.outcome == FaultState.PROPAGATED
        assert outcome.is_propagated
        assert isinstance(outcome.cause, RuntimeError)
        assert "handler broke" in outcome.diagnostic

    def test_every_outcome_is_terminal(self):
        outcomes = [
            ENGINE.classify(raise_fault("OutOfMemory")),
            ENGINE.classify(raise_fault("FileNotFound"), {"FileNotFound": lambda f: 1}),
            ENGINE.classify(raise_fault("NullReference"), {"NullReference": lambda f: 1 / 0}),
        ]

        assert [o.outcome for o in outcomes] == [
            FaultState.ABORTED,
            FaultState.RECOVERED,
            FaultState.PROPAGATED,
        ]
        assert all(o.outcome.is_terminal for o in outcomes)


class TestEngineContract:
    """Engine guarantees: one terminal state, no retries, registered kinds only"""

    def test_unregistered_kind_rejected(self):
        stranger = RaisedFault(FaultKind("Stranger", FaultCategory.UNCHECKED))

        with pytest.raises(UnknownKindError):
            ENGINE.classify(stranger)

    def test_same_name_different_kind_rejected(self):
        impostor = RaisedFault(FaultKind("FileNotFound", FaultCategory.UNCHECKED))

        with pytest.raises(UnknownKindError):
            ENGINE.classify(impostor)

    def test_outcome_copies_fault_fields(self):
        fault = raise_fault("FileNotFound", context="site")
        outcome = ENGINE.classify(fault)

        assert outcome.kind == "FileNotFound"
        assert outcome.category is FaultCategory.CHECKED
        assert outcome.context == "site"
        assert outcome.timestamp == fault.timestamp

    def test_to_dict_serializable(self):
        outcome = ENGINE.classify(raise_fault("NullReference"), {"NullReference": lambda f: 1 / 0})
        data = outcome.to_dict()

        assert data["outcome"] == "propagated"
        assert data["disposition"] == "optionally_handled"
        assert data["category"] == "unchecked"
        assert data["cause"].startswith("ZeroDivisionError")

    def test_module_level_classify(self):
        outcome = classify(raise_fault("FileNotFound"), registry=REGISTRY)

        assert outcome.is_abort

    def test_ambient_handlers_used_when_none_given(self):
        with handling(FileNotFound=lambda f: "ambient", registry=REGISTRY):
            outcome = ENGINE.classify(raise_fault("FileNotFound"))

        assert outcome.value == "ambient"

    def test_explicit_handlers_override_ambient(self):
        with handling(FileNotFound=lambda f: "ambient", registry=REGISTRY):
            outcome = ENGINE.classify(raise_fault("FileNotFound"), HandlerChain.empty())

        assert outcome.is_abort

    def test_concurrent_classify(self):
        results = []
        lock = threading.Lock()

        def worker(i):
            handlers = {"IndexOutOfRange": lambda f, i=i: i}
            outcome = ENGINE.classify(raise_fault("IndexOutOfRange"), handlers)
            with lock:
                results.append((i, outcome.value))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == [(i, i) for i in range(16)]
