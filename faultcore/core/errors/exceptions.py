# faultcore/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

from . import codes

if TYPE_CHECKING:
    from ..policy.outcome import HandlingOutcome


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded rather than leaking into callers' taxonomy.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class FaultCoreError(Exception):
    """
    The one public exception type for FaultCore.

    Registry misuse, policy violations and configuration problems are all
    raised as (subclasses of) this type, each with a stable error_code.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_registry_error(self) -> bool:
        return self.error_code in codes.REGISTRY_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def invalid_config(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "FaultCoreError":
        return ConfigError(message, details=details, cause=cause)

    @classmethod
    def not_checked(cls, kind_name: str, category: str) -> "FaultCoreError":
        return cls(
            message=f"Fault kind '{kind_name}' is {category}, only checked kinds can be declared",
            error_code=codes.NOT_CHECKED,
            details={"kind": kind_name, "category": category},
        )


class DuplicateKindError(FaultCoreError):
    """A fault kind with the same name (or exception mapping) is already registered."""

    def __init__(self, name: str, message: Optional[str] = None, **details: Any):
        super().__init__(
            message=message or f"Fault kind '{name}' is already registered",
            error_code=codes.DUPLICATE_KIND,
            details={"kind": name, **details},
        )
        self.name = name

    def __reduce__(self):
        return type(self), (self.name, self.message), self.__dict__


class UnknownKindError(FaultCoreError, LookupError):
    """Lookup of a fault kind that was never registered."""

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Fault kind '{name}' is not registered",
            error_code=codes.UNKNOWN_KIND,
            details={"kind": name},
        )
        self.name = name

    def __reduce__(self):
        return type(self), (self.name, self.message), self.__dict__


class RegistrySealedError(FaultCoreError):
    """Registration attempted after the registry was sealed."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Cannot register '{name}': fault registry is sealed",
            error_code=codes.REGISTRY_SEALED,
            details={"kind": name},
        )
        self.name = name

    def __reduce__(self):
        return type(self), (self.name,), self.__dict__


class FaultAbort(FaultCoreError):
    """
    Raised by enact() for an aborted outcome when the process is configured
    not to exit on its own.
    """

    def __init__(self, outcome: "HandlingOutcome"):
        super().__init__(
            message=outcome.diagnostic or f"Fault '{outcome.kind}' aborted",
            error_code=codes.FAULT_ABORTED,
            details={"kind": outcome.kind, "context": outcome.context},
        )
        self.outcome = outcome

    def __reduce__(self):
        return type(self), (self.outcome,), self.__dict__


class ConfigError(FaultCoreError):
    """Configuration could not be turned into a registry or policy."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            message=message,
            error_code=codes.INVALID_CONFIG,
            details=details or {},
            cause=cause,
        )

    def __reduce__(self):
        return type(self), (self.message,), self.__dict__
