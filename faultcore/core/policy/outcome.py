# faultcore/core/policy/outcome.py
"""
HandlingOutcome: result of classifying a raised fault.

Every outcome records:
- outcome: the terminal state the fault ended in (aborted/recovered/propagated)
- disposition: what the fault's category demands (abort/must_handle/optionally_handled)
- diagnostic: human-readable message for aborted and propagated faults

Callers branch on the outcome instead of relying on stack unwinding.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..faults.category import FaultCategory
from ..faults.models import RaisedFault


class FaultState(str, Enum):
    """
    Per-fault lifecycle.

    RAISED -> CLASSIFIED -> {ABORTED | RECOVERED | PROPAGATED}
    """
    RAISED = "raised"
    CLASSIFIED = "classified"
    ABORTED = "aborted"
    RECOVERED = "recovered"
    PROPAGATED = "propagated"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({FaultState.ABORTED, FaultState.RECOVERED, FaultState.PROPAGATED})


class Disposition(str, Enum):
    """
    What a category demands of the call path.

    - ABORT: fatal, terminate the process
    - MUST_HANDLE: checked, a handler must have been declared
    - OPTIONALLY_HANDLED: unchecked, handled if a handler exists
    """
    ABORT = "abort"
    MUST_HANDLE = "must_handle"
    OPTIONALLY_HANDLED = "optionally_handled"


DISPOSITIONS: Dict[FaultCategory, Disposition] = {
    FaultCategory.FATAL: Disposition.ABORT,
    FaultCategory.CHECKED: Disposition.MUST_HANDLE,
    FaultCategory.UNCHECKED: Disposition.OPTIONALLY_HANDLED,
}


def _outcome_fields(fault: RaisedFault) -> Dict[str, Any]:
    return {
        "disposition": DISPOSITIONS[fault.kind.category],
        "kind": fault.kind.name,
        "category": fault.kind.category,
        "context": fault.context,
        "timestamp": fault.timestamp,
    }


class HandlingOutcome(BaseModel):
    """
    Result of classifying one RaisedFault.

    Core fields:
    - outcome: aborted | recovered | propagated
    - disposition: abort | must_handle | optionally_handled
    - kind / category / context / timestamp: copied from the raised fault

    Result fields:
    - value: handler return value (recovered)
    - cause: handler exception (propagated)
    - diagnostic: message naming the kind and context (aborted, propagated)
    """
    model_config = ConfigDict(frozen=True)

    outcome: FaultState = Field(description="Terminal state: aborted/recovered/propagated")
    disposition: Disposition = Field(description="What the category demands")
    kind: str = Field(description="Fault kind name")
    category: FaultCategory = Field(description="Fault category")
    context: str = Field(default="", description="Call site description")
    timestamp: str = Field(default="", description="When the fault was raised (ISO-8601)")

    diagnostic: Optional[str] = Field(default=None, description="Human-readable diagnostic")
    value: Any = Field(default=None, description="Recovered value")
    cause: Any = Field(default=None, exclude=True, description="Exception raised by the handler")

    @property
    def is_abort(self) -> bool:
        return self.outcome == FaultState.ABORTED

    @property
    def is_recovered(self) -> bool:
        return self.outcome == FaultState.RECOVERED

    @property
    def is_propagated(self) -> bool:
        return self.outcome == FaultState.PROPAGATED

    @classmethod
    def abort(cls, fault: RaisedFault, diagnostic: str) -> "HandlingOutcome":
        """Create an ABORTED outcome"""
        return cls(outcome=FaultState.ABORTED, diagnostic=diagnostic, **_outcome_fields(fault))

    @classmethod
    def recovered(cls, fault: RaisedFault, value: Any = None) -> "HandlingOutcome":
        """Create a RECOVERED outcome"""
        return cls(outcome=FaultState.RECOVERED, value=value, **_outcome_fields(fault))

    @classmethod
    def propagated(
        cls,
        fault: RaisedFault,
        cause: BaseException,
        diagnostic: str,
    ) -> "HandlingOutcome":
        """Create a PROPAGATED outcome"""
        return cls(
            outcome=FaultState.PROPAGATED,
            cause=cause,
            diagnostic=diagnostic,
            **_outcome_fields(fault),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", exclude={"value"})
        if self.cause is not None:
            data["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return data


__all__ = [
    "FaultState",
    "TERMINAL_STATES",
    "Disposition",
    "DISPOSITIONS",
    "HandlingOutcome",
]
