# faultcore/api/__init__.py
"""
FaultCore User-facing API

- enact(): act on a HandlingOutcome (return, re-raise or abort)
- throws(): declare the checked kinds a function may raise
- guard(): classify and enact exceptions raised by a function
"""

from .enact import enact
from .guard import throws, guard, declared_faults

__all__ = [
    "enact",
    "throws",
    "guard",
    "declared_faults",
]
