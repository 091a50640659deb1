# faultcore/core/policy/__init__.py
"""
Handling policy

Classification of raised faults into handling outcomes, and the handler
scopes that declare recovery along a call path.
"""

from .outcome import (
    FaultState,
    TERMINAL_STATES,
    Disposition,
    DISPOSITIONS,
    HandlingOutcome,
)
from .handlers import (
    Handler,
    HandlerChain,
    current_chain,
    handling,
)
from .engine import PolicyEngine, classify

__all__ = [
    "FaultState",
    "TERMINAL_STATES",
    "Disposition",
    "DISPOSITIONS",
    "HandlingOutcome",
    "Handler",
    "HandlerChain",
    "current_chain",
    "handling",
    "PolicyEngine",
    "classify",
]
