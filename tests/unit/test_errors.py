# tests/unit/test_errors.py
"""
Error taxonomy tests

Exceptions must survive pickling so they can cross process boundaries
(multiprocessing, concurrent.futures) with their codes and payloads intact.
"""

import pickle

import pytest

from faultcore import RaisedFault, classify
from faultcore.core.errors import (
    ConfigError,
    DuplicateKindError,
    FaultAbort,
    FaultCoreError,
    RegistrySealedError,
    UnknownKindError,
    codes,
)


def roundtrip(exc):
    return pickle.loads(pickle.dumps(exc))


class TestPickling:
    """Subclasses rebuild from their real constructor arguments"""

    def test_fault_abort_keeps_outcome(self, registry):
        fault = RaisedFault(registry.lookup("OutOfMemory"), context="heap exhausted")
        outcome = classify(fault, registry=registry)
        restored = roundtrip(FaultAbort(outcome))

        assert isinstance(restored, FaultAbort)
        assert restored.error_code == codes.FAULT_ABORTED
        assert restored.outcome.kind == "OutOfMemory"
        assert restored.outcome.is_abort
        assert restored.message == outcome.diagnostic
        assert restored.details == {"kind": "OutOfMemory", "context": "heap exhausted"}

    def test_fault_abort_can_be_reraised(self, registry):
        outcome = classify(RaisedFault(registry.lookup("OutOfMemory")), registry=registry)

        with pytest.raises(FaultAbort) as exc_info:
            raise roundtrip(FaultAbort(outcome))

        assert exc_info.value.outcome.kind == "OutOfMemory"

    def test_duplicate_kind(self):
        restored = roundtrip(DuplicateKindError("FileNotFound", exception="builtins.FileNotFoundError"))

        assert restored.name == "FileNotFound"
        assert restored.error_code == codes.DUPLICATE_KIND
        assert restored.details == {"kind": "FileNotFound", "exception": "builtins.FileNotFoundError"}
        assert "already registered" in str(restored)

    def test_unknown_kind(self):
        restored = roundtrip(UnknownKindError("Missing"))

        assert isinstance(restored, LookupError)
        assert restored.name == "Missing"
        assert restored.error_code == codes.UNKNOWN_KIND
        assert restored.message == "Fault kind 'Missing' is not registered"

    def test_registry_sealed(self):
        restored = roundtrip(RegistrySealedError("Late"))

        assert restored.name == "Late"
        assert restored.error_code == codes.REGISTRY_SEALED
        assert "sealed" in restored.message

    def test_config_error(self):
        restored = roundtrip(ConfigError("bad kind", details={"path": "registry.kinds[0]"}))

        assert restored.error_code == codes.INVALID_CONFIG
        assert restored.details == {"path": "registry.kinds[0]"}
        assert str(restored) == "[INVALID_CONFIG] bad kind"

    def test_base_error(self):
        restored = roundtrip(FaultCoreError.not_checked("OutOfMemory", "fatal"))

        assert restored.error_code == codes.NOT_CHECKED
        assert restored.details == {"kind": "OutOfMemory", "category": "fatal"}
