# faultcore/core/policy/engine.py
"""
Handling Policy Engine

Classifies a RaisedFault by its category and dispatches it:

- FATAL      -> ABORTED (handlers are never consulted)
- CHECKED    -> must have a declared handler, else ABORTED
                ("unhandled checked fault")
- UNCHECKED  -> RECOVERED through a handler if one exists, else ABORTED

A handler's return value becomes the recovered value. A handler that
raises turns the outcome into PROPAGATED, carrying the exception.

The engine holds only a sealed registry. It keeps no state between
calls, performs no retries and may be called from any thread.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union
import logging

from ..errors import UnknownKindError
from ..faults.category import FaultCategory
from ..faults.models import RaisedFault
from ..faults.registry import FaultRegistry, get_default_registry
from .handlers import Handler, HandlerChain, as_chain
from .outcome import HandlingOutcome

logger = logging.getLogger(__name__)

Handlers = Union[HandlerChain, Mapping[str, Handler], None]


def _where(fault: RaisedFault) -> str:
    return f" at {fault.context}" if fault.context else ""


class PolicyEngine:
    """
    Stateless classifier over a read-only registry.

    Usage:
    ```python
    engine = PolicyEngine(registry)
    outcome = engine.classify(RaisedFault(kind, context="reading config"))
    if outcome.is_abort:
        ...
    ```
    """

    def __init__(self, registry: Optional[FaultRegistry] = None):
        self._registry = registry

    @property
    def registry(self) -> FaultRegistry:
        if self._registry is None:
            return get_default_registry()
        return self._registry

    def classify(self, fault: RaisedFault, handlers: Handlers = None) -> HandlingOutcome:
        """
        Classify a raised fault and dispatch it.

        Args:
            fault: The raised fault
            handlers: Explicit handlers (mapping or chain). If None, the
                handlers declared on the current call path are used.

        Returns:
            HandlingOutcome in a terminal state

        Raises:
            UnknownKindError: If fault.kind is not the kind registered
                under its name
        """
        if not self.registry.contains(fault.kind):
            raise UnknownKindError(fault.kind.name)

        category = fault.kind.category
        logger.debug(f"Classifying {fault.kind.name} ({category.value}){_where(fault)}")

        if category is FaultCategory.FATAL:
            return self._abort(
                fault, f"fatal fault {fault.kind.name}{_where(fault)}: no recovery possible"
            )

        handler = as_chain(handlers).find(fault.kind.name)
        if handler is None:
            if category is FaultCategory.CHECKED:
                return self._abort(
                    fault, f"unhandled checked fault {fault.kind.name}{_where(fault)}"
                )
            return self._abort(
                fault, f"unhandled unchecked fault {fault.kind.name}{_where(fault)}"
            )

        return self._run_handler(fault, handler)

    def _run_handler(self, fault: RaisedFault, handler: Handler) -> HandlingOutcome:
        try:
            value = handler(fault)
        except Exception as e:
            diagnostic = (
                f"handler for {fault.kind.name} raised {type(e).__name__}: {e}"
                f"{_where(fault)}"
            )
            logger.debug(diagnostic)
            return HandlingOutcome.propagated(fault, e, diagnostic)

        logger.debug(f"Recovered {fault.kind.name}{_where(fault)}")
        return HandlingOutcome.recovered(fault, value)

    def _abort(self, fault: RaisedFault, diagnostic: str) -> HandlingOutcome:
        logger.debug(f"Abort: {diagnostic}")
        return HandlingOutcome.abort(fault, diagnostic)

    def __repr__(self) -> str:
        return f"PolicyEngine(registry={self._registry!r})"


def classify(
    fault: RaisedFault,
    handlers: Handlers = None,
    *,
    registry: Optional[FaultRegistry] = None,
) -> HandlingOutcome:
    """Classify a fault with a throwaway engine over registry (default if None)"""
    return PolicyEngine(registry).classify(fault, handlers)


__all__ = [
    "Handlers",
    "PolicyEngine",
    "classify",
]
