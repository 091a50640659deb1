# faultcore/core/faults/models.py
"""
Fault records

FaultKind describes a kind of fault and its category.
RaisedFault is one occurrence of a kind at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple, Type, TYPE_CHECKING

from .category import FaultCategory

if TYPE_CHECKING:
    from .registry import FaultRegistry


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class FaultKind:
    """
    A concrete kind of fault

    name: Unique registry key (e.g. "FileNotFound")
    category: Exactly one FaultCategory
    description: Human-readable explanation
    exceptions: Python exception types that surface as this kind
    """
    name: str
    category: FaultCategory
    description: str = ""
    exceptions: Tuple[Type[BaseException], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("FaultKind.name must be a non-empty string")
        # Accept "checked" etc. from config
        object.__setattr__(self, "category", FaultCategory.parse(self.category))
        object.__setattr__(self, "exceptions", tuple(self.exceptions))
        for exc_type in self.exceptions:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise TypeError(f"FaultKind '{self.name}': {exc_type!r} is not an exception type")

    @property
    def recoverable(self) -> bool:
        return self.category.recoverable

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "exceptions": [f"{e.__module__}.{e.__qualname__}" for e in self.exceptions],
        }


@dataclass(frozen=True)
class RaisedFault:
    """
    One occurrence of a fault

    Created when the fault condition is detected, consumed by the
    policy engine and then discarded.
    """
    kind: FaultKind
    context: str = ""
    timestamp: str = field(default_factory=_now_iso)
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        registry: "FaultRegistry",
        context: Optional[str] = None,
    ) -> "RaisedFault":
        """
        Build a RaisedFault from a live exception.

        Args:
            exc: The exception that was raised
            registry: Registry holding the exception mapping
            context: Call site description (defaults to the exception text)

        Raises:
            UnknownKindError: If no registered kind maps the exception type
        """
        kind = registry.match_exception(exc)
        if context is None:
            context = str(exc) or type(exc).__name__
        return cls(kind=kind, context=context, cause=exc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.name,
            "category": self.kind.category.value,
            "context": self.context,
            "timestamp": self.timestamp,
        }


__all__ = [
    "FaultKind",
    "RaisedFault",
]
