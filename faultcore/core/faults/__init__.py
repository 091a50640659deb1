# faultcore/core/faults/__init__.py
"""
Fault model

Categories, fault kinds, raised faults and the registry mapping one to
the other.
"""

from .category import (
    FaultCategory,
    is_recoverable,
    requires_static_declaration,
    most_severe,
)
from .models import FaultKind, RaisedFault
from .registry import (
    FaultRegistry,
    get_default_registry,
    set_default_registry,
    reset_default_registry,
)
from .builtin import (
    OUT_OF_MEMORY,
    FILE_NOT_FOUND,
    INDEX_OUT_OF_RANGE,
    BUILTIN_KINDS,
    register_builtin_kinds,
    build_registry,
)

__all__ = [
    "FaultCategory",
    "is_recoverable",
    "requires_static_declaration",
    "most_severe",
    "FaultKind",
    "RaisedFault",
    "FaultRegistry",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
    "OUT_OF_MEMORY",
    "FILE_NOT_FOUND",
    "INDEX_OUT_OF_RANGE",
    "BUILTIN_KINDS",
    "register_builtin_kinds",
    "build_registry",
]
